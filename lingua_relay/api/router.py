from fastapi import APIRouter

from lingua_relay.api.routes import health, metadata, speech, translation

api_router = APIRouter()

api_router.include_router(health.router, tags=["health"])
api_router.include_router(translation.router, tags=["translation"])
api_router.include_router(speech.router, tags=["speech"])
api_router.include_router(metadata.router, tags=["metadata"])
