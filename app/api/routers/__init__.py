"""
app/api/routers package marker.
"""

from app.api.routers.columns_router import router as columns_router
from app.api.routers.insight_router import router as insight_router
from app.api.routers.query_router import router as query_router
from app.api.routers.rules_router import router as rules_router
from app.api.routers.validation_router import router as validation_router

__all__ = [
    "columns_router",
    "insight_router",
    "query_router",
    "rules_router",
    "validation_router",
]
