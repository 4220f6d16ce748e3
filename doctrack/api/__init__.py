"""HTTP API (FastAPI routers and dependency composition)."""
