"""
Interfaces for the auth bounded context.

- routers: transport-agnostic request handlers mapping errors to statuses
- endpoints: FastAPI routes adapting HTTP requests onto those routers
- dependencies: composition root wiring adapters into use cases
"""
