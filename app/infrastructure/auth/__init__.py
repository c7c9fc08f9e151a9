"""
Infrastructure adapters for the auth bounded context.

Each adapter implements a domain port (ABC) and connects
to external systems: the SQL user store, argon2, PyJWT.
"""
