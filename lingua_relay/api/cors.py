from fastapi import Response

ALLOWED_METHODS = "POST, OPTIONS"
ALLOWED_HEADERS = "Content-Type"


def preflight_response(allow_origin: str) -> Response:
    """Empty pre-flight reply advertising the proxy's cross-origin policy."""
    return Response(
        headers={
            "Access-Control-Allow-Origin": allow_origin,
            "Access-Control-Allow-Methods": ALLOWED_METHODS,
            "Access-Control-Allow-Headers": ALLOWED_HEADERS,
        }
    )
