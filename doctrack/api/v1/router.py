"""API v1 router aggregation.

Includes all endpoint modules with consistent prefix and tags. All routes
use dependencies from doctrack.api.v1.dependencies (no manual repo/service construction).
"""

from fastapi import APIRouter

from doctrack.api.v1.endpoints import document_types, documents, employees, health

api_router = APIRouter()

api_router.include_router(health.router, prefix="/health", tags=["health"])
api_router.include_router(employees.router, prefix="/employees", tags=["employees"])
api_router.include_router(
    document_types.router, prefix="/document-types", tags=["document-types"]
)
api_router.include_router(documents.router, prefix="/documents", tags=["documents"])
