"""
FastAPI routers.

Each module exposes an APIRouter that the application in app.py includes.
"""
