"""
High-level use cases for the Clients API.

Each service module orchestrates repositories/adapters to implement business
rules (validate payloads, check a client's CPF, resolve a CEP).

Routers (FastAPI endpoints) call these services instead of manipulating the
JSON file directly.
"""
