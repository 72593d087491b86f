"""Health check endpoints."""

import falcon.asgi


class HealthResource:
    """Health and readiness endpoints."""

    def __init__(self, metadata=None) -> None:
        self._metadata = metadata

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health - liveness."""
        resp.media = {"status": "ok"}
        resp.status = falcon.HTTP_200

    async def on_get_ready(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """GET /v1/health/ready - readiness (mapping metadata built)."""
        entities = len(self._metadata.entities) if self._metadata is not None else 0
        resp.media = {"status": "ready", "entities": entities}
        resp.status = falcon.HTTP_200
