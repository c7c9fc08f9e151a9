"""
Application layer for the auth bounded context.

Use cases coordinate validation chains and ports to fulfill
login, sign-up and portfolio creation. No framework or
infrastructure imports allowed.
"""
