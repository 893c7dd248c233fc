"""Accounts bounded context: users and authentication."""
