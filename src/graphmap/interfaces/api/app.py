"""Falcon ASGI application."""

import falcon.asgi
from falcon.asgi import App

from graphmap.interfaces.api.resources.entities import EntitiesResource, EntityResource
from graphmap.interfaces.api.resources.health import HealthResource


def create_app(
    entities_resource: EntitiesResource,
    entity_resource: EntityResource,
    health_resource: HealthResource,
) -> App:
    """Create Falcon ASGI app with routes."""
    app = falcon.asgi.App()
    app.add_route("/v1/health", health_resource)
    app.add_route("/v1/health/ready", health_resource, suffix="ready")
    app.add_route("/v1/entities", entities_resource)
    app.add_route("/v1/entities/{name}", entity_resource)
    return app
