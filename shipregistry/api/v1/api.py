from fastapi import APIRouter
from shipregistry.api.v1.endpoints import ships

api_router = APIRouter()

api_router.include_router(ships.router, prefix="/ships", tags=["ships"])
