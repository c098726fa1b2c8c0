import uvicorn

from lingua_relay.core.app import create_app
from lingua_relay.core.config import get_settings

app = create_app()


def run() -> None:
    """Entrypoint for `lingua-relay` script."""
    settings = get_settings()
    uvicorn.run(
        "lingua_relay.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=settings.debug,
        factory=False,
    )


if __name__ == "__main__":
    run()
