"""
Persistence adapters.

These modules encapsulate how client records are stored/retrieved (today a JSON
file). Services and routers depend on ClientRepository rather than touching the
file directly.
"""
