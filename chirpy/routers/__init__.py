"""
FastAPI routers grouped by domain (chirps, users, hooks, admin).

Each file inside this package exposes an APIRouter that is included in the
main application (app.py). Routers translate store/service errors into HTTP
status codes; the business rules live in services and the record store.
"""
