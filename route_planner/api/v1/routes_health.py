# route_planner/api/v1/routes_health.py
from fastapi import APIRouter
from route_planner.core.config import settings

router = APIRouter(
    prefix="/health",
    tags=["health"],
)


@router.get("/", summary="Health check")
async def health_check():
    """
    Report that the API is up, along with the route policy it runs with.
    """
    return {
        "status": "ok",
        "app": settings.APP_NAME,
        "version": settings.APP_VERSION,
        "environment": settings.ENVIRONMENT,
        "route_policy": settings.route_policy().model_dump(),
    }
