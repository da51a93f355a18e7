from fastapi import APIRouter

from . import auth, bookings, catalog, site

api_router = APIRouter(prefix="/api")

api_router.include_router(auth.router)
for r in catalog.routers:
    api_router.include_router(r)
api_router.include_router(bookings.router)
api_router.include_router(site.router)
