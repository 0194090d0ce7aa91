from .models import (
    DisplaySector,
    FormState,
    SectorNode,
    SectorRecord,
    Submission,
    to_sector_records,
)
from .sector_tree import (
    DEFAULT_DEPTH_MARKER,
    build_display_sectors,
    build_sector_tree,
    flatten_sector_tree,
)
from .validation import validate_form

__all__ = [
    "DisplaySector",
    "FormState",
    "SectorNode",
    "SectorRecord",
    "Submission",
    "to_sector_records",
    "DEFAULT_DEPTH_MARKER",
    "build_display_sectors",
    "build_sector_tree",
    "flatten_sector_tree",
    "validate_form",
]
