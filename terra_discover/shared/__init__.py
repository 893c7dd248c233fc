"""
Shared module package.

Contains cross-cutting concerns used across bounded contexts:
- Error rendering for FastAPI
- Security middleware
- Logging configuration
"""
