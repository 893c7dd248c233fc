"""
Shared error handling package.

Renders every failure as a ``{"message", "code"}`` JSON body whose
status code comes from the error's kind.
"""
