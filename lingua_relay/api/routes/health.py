from datetime import datetime, timezone

from fastapi import APIRouter

router = APIRouter()


@router.get("/healthz")
async def healthcheck() -> dict[str, str]:
    """Liveness probe; never touches the upstream API."""
    return {"status": "ok", "timestamp": datetime.now(timezone.utc).isoformat()}
