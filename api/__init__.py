"""
API layer - FastAPI routers, dependencies and exception mapping
"""
