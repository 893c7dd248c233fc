"""
Interfaces layer package.

FastAPI routers, camelCase Pydantic schemas and the dependency
functions that compose adapters into use cases. Routes translate
HTTP to commands and entities to responses; nothing else.
"""
