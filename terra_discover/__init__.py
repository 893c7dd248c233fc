"""
Terra Discover: catalog API for points of interest ("spaces").

Application package root. This is a modular monolith using
hexagonal architecture (ports & adapters) with domain-driven design.

Bounded contexts:
    - catalog: Spaces and their taxonomies (types, categories, features).
    - accounts: Users, registration, login and bearer-token authentication.

Layers:
    - domain: Pure business logic, entities, ports (ABCs), errors.
    - application: Use cases, DTOs, orchestration, error mapping.
    - infrastructure: Adapters (SQLAlchemy, bcrypt, JWT) implementing domain ports.
    - interfaces: FastAPI routers, Pydantic schemas.
    - shared: Cross-cutting concerns (errors, security, logging).
"""
