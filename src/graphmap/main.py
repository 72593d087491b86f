"""Application entry point and composition root."""

import argparse
import json
import logging
import sys
from dataclasses import asdict

from graphmap import __version__
from graphmap.application.use_cases.entity.describe_entity import (
    DescribeEntityUseCase,
    describe,
)
from graphmap.application.use_cases.entity.list_entities import ListEntitiesUseCase
from graphmap.config import Settings, get_settings
from graphmap.domain.exceptions import GraphMapError
from graphmap.infrastructure.mapping.entity_discovery import import_entity_types
from graphmap.infrastructure.mapping.mapping_context import MappingContext
from graphmap.interfaces.api.app import create_app
from graphmap.interfaces.api.resources.entities import EntitiesResource, EntityResource
from graphmap.interfaces.api.resources.health import HealthResource

logger = logging.getLogger(__name__)


def _configure_logging(settings: Settings) -> None:
    level = "DEBUG" if settings.debug else settings.log_level.upper()
    logging.basicConfig(level=level, format="%(asctime)s %(levelname)s %(name)s: %(message)s")


def build_mapping_context(settings: Settings, module_names: list[str] | None = None) -> MappingContext:
    """Build metadata for every entity class in the configured modules."""
    context = MappingContext.from_settings(settings)
    names = module_names if module_names is not None else settings.entity_module_names
    entities = context.add_entity_types(import_entity_types(names))
    logger.info("Mapped %d entities from %s", len(entities), ", ".join(names) or "no modules")
    return context


def create_graphmap_app(settings: Settings | None = None, context: MappingContext | None = None):
    """Composition root - build Falcon app with all dependencies."""
    settings = settings or get_settings()
    if context is None:
        context = build_mapping_context(settings)

    return create_app(
        entities_resource=EntitiesResource(ListEntitiesUseCase(context)),
        entity_resource=EntityResource(DescribeEntityUseCase(context)),
        health_resource=HealthResource(context),
    )


def main(argv: list[str] | None = None) -> int:
    """CLI entry point."""
    parser = argparse.ArgumentParser(prog="graphmap", description="Graph mapping metadata")
    commands = parser.add_subparsers(dest="command")
    commands.add_parser("version", help="Print the version")
    describe_cmd = commands.add_parser("describe", help="Print the mapping of entity modules as JSON")
    describe_cmd.add_argument("modules", nargs="+", help="Modules defining entity classes")
    commands.add_parser("serve", help="Run the introspection API")
    args = parser.parse_args(argv)

    settings = get_settings()
    _configure_logging(settings)

    if args.command == "describe":
        try:
            context = build_mapping_context(settings, args.modules)
        except (GraphMapError, ImportError) as e:
            print(f"graphmap: {e}", file=sys.stderr)
            return 1
        output = [asdict(describe(e)) for e in sorted(context.entities, key=lambda e: e.name)]
        print(json.dumps(output, indent=2))
        return 0
    if args.command == "serve":
        run_server(settings)
        return 0

    print(f"graphmap v{__version__}")
    return 0


def run_server(settings: Settings) -> None:
    """Run uvicorn server."""
    import uvicorn

    app = create_graphmap_app(settings)
    uvicorn.run(app, host=settings.api_host, port=settings.api_port)
