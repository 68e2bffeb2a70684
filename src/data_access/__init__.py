"""
Data Access Layer - Everything that touches the network.
"""
