"""Health check endpoint."""

from fastapi import APIRouter, Request

router = APIRouter()


@router.get("/health")
def health_check(request: Request) -> dict[str, str]:
    """Return application and catalog status."""
    service = getattr(request.app.state, "board_service", None)
    if service is None:
        return {"status": "error", "catalog": "not loaded"}
    return {"status": "ok", "catalog": "loaded"}
