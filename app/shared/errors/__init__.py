"""
Shared error handling package.

Backstop error-to-HTTP mapping for anything that escapes the
use-case routers, using the same response shape.
"""
