from fastapi import APIRouter, Depends
from app.services.health_service import HealthService
from app.core.dependencies import get_health_service

# Unguarded so probes work without the API token
router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
def health_check(health_service: HealthService = Depends(get_health_service)):
    """Database reachability, ledger counts and API guard state"""
    return health_service.health_check()


@router.get("/database")
def database_info(health_service: HealthService = Depends(get_health_service)):
    return health_service.get_database_info()
