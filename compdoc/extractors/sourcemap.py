"""Recovery of original source text embedded in JavaScript source maps."""

from __future__ import annotations

import json
from pathlib import Path
from typing import Any, Dict

from ..errors import MalformedArtifactError


def read_source_map(path: Path) -> Dict[str, Any]:
    """Read and parse a ``.js.map`` file."""
    try:
        payload = json.loads(Path(path).read_text(encoding="utf-8"))
    except (OSError, UnicodeDecodeError) as exc:
        raise MalformedArtifactError(Path(path), f"unreadable ({exc})") from exc
    except json.JSONDecodeError as exc:
        raise MalformedArtifactError(Path(path), f"invalid JSON ({exc.msg})") from exc
    if not isinstance(payload, dict):
        raise MalformedArtifactError(Path(path), "source map root is not an object")
    return payload


def extract_source_content(path: Path, index: int = 0) -> str:
    """Return the original source text stored at ``sourcesContent[index]``."""
    payload = read_source_map(path)
    contents = payload.get("sourcesContent")
    if not isinstance(contents, list) or not contents:
        raise MalformedArtifactError(Path(path), "no embedded sourcesContent")
    if index < 0 or index >= len(contents):
        raise MalformedArtifactError(
            Path(path), f"source index {index} out of bounds ({len(contents)} entries)"
        )
    content = contents[index]
    if not isinstance(content, str):
        raise MalformedArtifactError(Path(path), f"sourcesContent[{index}] is not text")
    return content


def source_file_name(path: Path, index: int = 0) -> str | None:
    """Return the original file name recorded at ``sources[index]``, if any."""
    payload = read_source_map(path)
    sources = payload.get("sources")
    if not isinstance(sources, list) or index >= len(sources):
        return None
    name = sources[index]
    return name if isinstance(name, str) else None


__all__ = ["extract_source_content", "read_source_map", "source_file_name"]
