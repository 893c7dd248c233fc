"""
Domain layer package.

Contains entities, ports and errors. No framework imports allowed.
"""
