"""
Business Logic Layer - Order placement workflow and its collaborator contracts.
"""
