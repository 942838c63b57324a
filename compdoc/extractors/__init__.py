"""Source extraction for the supported component representations."""

from .locator import SourceBundle, SourceLocator, read_artifact_text
from .sourcemap import extract_source_content, read_source_map

__all__ = [
    "SourceBundle",
    "SourceLocator",
    "extract_source_content",
    "read_artifact_text",
    "read_source_map",
]
