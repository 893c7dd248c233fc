"""Catalog bounded context: spaces, types, categories and features."""
