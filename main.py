#!/usr/bin/env python
"""
Main entry point for the Collection Client.

Usage:
    python main.py                          # Interactive session
    python main.py --host 10.0.0.5          # Connect to another host
    python main.py --script commands.txt    # Run a script, then continue interactively
    python main.py --env-file client.env    # Load host/port from a file
"""

import sys
import argparse
from pathlib import Path

# Add src to path - must be done before any local imports
_src_path = Path(__file__).parent / "src"
sys.path.insert(0, str(_src_path))

from orchestration import create_session_controller, ClientConfig


def build_config(args: argparse.Namespace) -> ClientConfig:
    """Combine defaults, the optional env file and command line overrides."""
    if args.env_file:
        config = ClientConfig.from_env_file(args.env_file)
    else:
        config = ClientConfig.from_defaults()

    if args.host or args.port:
        config = ClientConfig(
            host=args.host or config.host,
            port=args.port or config.port,
            max_payload_size=config.max_payload_size,
            connect_timeout=config.connect_timeout,
            prompt=config.prompt
        )
    return config


def main():
    """Main entry point."""

    # Parse command line arguments
    parser = argparse.ArgumentParser(
        description="Study Group Collection Client",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Type client_help inside the session for the local commands.
Every other line is sent to the server.
        """
    )

    parser.add_argument(
        "--host",
        help="Server host (default: localhost)"
    )

    parser.add_argument(
        "--port", "-p",
        type=int,
        help="Server port (default: 5454)"
    )

    parser.add_argument(
        "--script",
        type=Path,
        help="Run commands from this file before the interactive session"
    )

    parser.add_argument(
        "--env-file",
        type=Path,
        help="Load COLLECTION_HOST / COLLECTION_PORT / COLLECTION_MAX_PAYLOAD from a file"
    )

    args = parser.parse_args()

    try:
        config = build_config(args)
        controller = create_session_controller(config)

        print(f"[INFO] Collection client for {config.host}:{config.port}")
        print("[INFO] Type client_help for local commands")

        controller.run(script=args.script)

        stop_reason = controller.state.stop_reason
        if stop_reason:
            print(f"\n[STOPPED] Client stopped: {stop_reason}")
            sys.exit(1)

        print("\n[COMPLETE] Client finished")
        sys.exit(0)

    except KeyboardInterrupt:
        print("\n\n[CANCELLED] Client interrupted by user")
        sys.exit(1)

    except Exception as e:
        print(f"\n[ERROR] Client failed: {e}")
        import traceback
        traceback.print_exc()
        sys.exit(1)


if __name__ == "__main__":
    main()
