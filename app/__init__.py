"""
AuthGate: user sign-up and login backend issuing signed access tokens.

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters).

Bounded contexts:
    - auth: Field validation chains, login, sign-up, portfolio creation.

Layers:
    - domain: Validation chains, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration.
    - infrastructure: Adapters (SQL store, argon2, JWT) implementing domain ports.
    - interfaces: Use-case routers, FastAPI routes, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, logging).
"""
