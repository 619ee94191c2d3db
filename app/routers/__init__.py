# API Routers
from app.routers.processing import router as processing_router
from app.routers.bunny import router as bunny_router
from app.routers.proxy import router as proxy_router

__all__ = ["processing_router", "bunny_router", "proxy_router"]
