"""API routes package.

- health: Health check endpoint
- pricing: Availability and price quotes

All routers are registered in main.py with the /api prefix.
"""

from stayquote_api.routes.health import router as health_router
from stayquote_api.routes.pricing import router as pricing_router

__all__ = [
    "health_router",
    "pricing_router",
]
