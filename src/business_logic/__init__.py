"""
Business Logic Layer - Command dispatch, local commands and authorization.
"""
