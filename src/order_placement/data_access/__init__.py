"""
Data Access Layer - Adapters that satisfy the order service's collaborator contracts.
"""
