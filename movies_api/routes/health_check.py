from fastapi import APIRouter

from movies_api.models import HealthStatus

router = APIRouter()


@router.get("", response_model=HealthStatus, summary="Get server status")
def health_check():
    """Returns a JSON response indicating the server is running."""
    return {"status": "Server is running"}
