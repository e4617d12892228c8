# === FILE: site_mirror/config.py ===
"""
Loading and validation of the SiteMirror configuration.
Pydantic describes the schema and checks the data; YAML and JSON files are accepted.
"""
from __future__ import annotations

import errno
import json
import os
from pathlib import Path
from typing import Any, Literal, Optional, Union

import yaml
from pydantic import BaseModel, ConfigDict, Field


class MirrorConfig(BaseModel):
    """Settings for one mirroring run."""
    model_config = ConfigDict(extra="forbid", frozen=True)

    timeout: float = Field(30.0, gt=0, description="Total timeout for a single request (seconds).")
    follow_redirects: bool = Field(
        False, description="Follow 3xx responses instead of treating them as failures."
    )
    max_concurrency: Optional[int] = Field(
        None, ge=1, description="Cap on simultaneous fetch+archive steps; null means unbounded."
    )
    relative_scheme: Literal["page", "href"] = Field(
        "page",
        description=(
            "Scheme for rewritten relative links: 'page' inherits the page scheme, "
            "'href' keeps the (usually empty) scheme parsed from the href itself."
        ),
    )


def _read_yaml(path: Path) -> dict[str, Any]:
    try:
        data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of YAML must be a mapping, got {type(data).__name__}")
    return data


def _read_json(path: Path) -> dict[str, Any]:
    try:
        data = json.loads(path.read_text(encoding="utf-8")) or {}
    except json.JSONDecodeError as exc:
        raise ValueError(f"Invalid JSON in {path}: {exc}") from exc
    if not isinstance(data, dict):
        raise TypeError(f"Top level of JSON must be a mapping, got {type(data).__name__}")
    return data


def load_config(path: Union[str, Path, None]) -> MirrorConfig:
    """
    Read a YAML or JSON file and return a validated MirrorConfig.
    ``None`` yields the defaults; a missing file raises FileNotFoundError.
    """
    if path is None:
        return MirrorConfig()

    path_obj = Path(path).expanduser().resolve()
    if not path_obj.is_file():
        raise FileNotFoundError(errno.ENOENT, os.strerror(errno.ENOENT), str(path_obj))

    suffix = path_obj.suffix.lower()
    if suffix in (".yaml", ".yml"):
        data = _read_yaml(path_obj)
    elif suffix == ".json":
        data = _read_json(path_obj)
    else:
        raise ValueError(f"Unsupported config format: {suffix}")

    return MirrorConfig(**data)


__all__ = ["MirrorConfig", "load_config"]
