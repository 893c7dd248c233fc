"""
Application layer package.

Use cases orchestrate domain services and ports. The error mapper
translates persistence failures into the domain error taxonomy.
"""
