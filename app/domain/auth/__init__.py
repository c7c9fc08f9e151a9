"""
Auth bounded context, domain layer.

This module contains all domain logic for the auth context:
- Field validation chains (username, password, email, portfolio name)
- User and portfolio entities
- Ports for credential hashing, token signing and persistence
"""
