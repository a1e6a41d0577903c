"""Field mapping exports."""

from .entity_mapper import ASSET_TAG_FIELD, derive_asset_tag, map_entity
from .mapping_models import (
    DestinationRecord,
    FieldMapping,
    FieldPath,
    Index,
    Name,
    PathSegment,
    build_field_mapping,
)
from .mapping_registry import (
    UnknownMappingError,
    mapping_names,
    resolve_mapping,
)
from .path_projection import MISSING_VALUE, project

__all__ = [
    "ASSET_TAG_FIELD",
    "MISSING_VALUE",
    "DestinationRecord",
    "FieldMapping",
    "FieldPath",
    "Index",
    "Name",
    "PathSegment",
    "UnknownMappingError",
    "build_field_mapping",
    "derive_asset_tag",
    "map_entity",
    "mapping_names",
    "project",
    "resolve_mapping",
]
