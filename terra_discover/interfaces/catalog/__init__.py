"""
HTTP interface for the catalog bounded context.
"""
