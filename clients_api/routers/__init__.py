"""
FastAPI routers grouped by domain.

Each file inside this package exposes an APIRouter that is included in the main
application (app.py). Routers only translate HTTP to service calls and results
to status codes; business rules live in services/repositories.
"""
