"""
Core utilities shared across the Clients API.

This package hosts:
- configuration helpers (env vars, storage path, CEP providers)
- cross-cutting services such as logging and the error hierarchy that the
  global exception handlers translate into JSON responses.
"""
