"""Application ports - interfaces for external adapters."""

from graphmap.application.ports.conversion_service import ConversionService
from graphmap.application.ports.entity_metadata import EntityMetadataProvider

__all__ = [
    "ConversionService",
    "EntityMetadataProvider",
]
