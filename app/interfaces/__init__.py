"""
Interfaces layer package.

Contains the use-case routers, FastAPI routes and Pydantic schemas.
No business logic belongs here. Routes call routers, routers call
use cases and map their outcome to an HTTP-shaped response.
"""
