"""Entity metadata API - list mapped entities and describe their properties."""

from dataclasses import asdict

import falcon.asgi

from graphmap.application.use_cases.entity.describe_entity import DescribeEntityUseCase
from graphmap.application.use_cases.entity.list_entities import ListEntitiesUseCase
from graphmap.domain.exceptions import NotFound


class EntitiesResource:
    """GET /v1/entities."""

    def __init__(self, list_entities: ListEntitiesUseCase) -> None:
        self._list_entities = list_entities

    async def on_get(self, req: falcon.asgi.Request, resp: falcon.asgi.Response) -> None:
        """List mapped entities."""
        kind = req.get_param("kind")
        items = self._list_entities.execute()
        if kind:
            items = [e for e in items if e.kind == kind]
        resp.media = {"items": [asdict(e) for e in items]}
        resp.status = falcon.HTTP_200


class EntityResource:
    """GET /v1/entities/{name}."""

    def __init__(self, describe_entity: DescribeEntityUseCase) -> None:
        self._describe_entity = describe_entity

    async def on_get(
        self,
        req: falcon.asgi.Request,
        resp: falcon.asgi.Response,
        name: str,
    ) -> None:
        """Describe the classified properties of one entity."""
        try:
            entity = self._describe_entity.execute(name)
        except NotFound as e:
            resp.status = falcon.HTTP_404
            resp.media = {"error": str(e)}
            return
        resp.media = asdict(entity)
        resp.status = falcon.HTTP_200
