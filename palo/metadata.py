# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Project metadata: the pending version and the homepage used for commit
links. Read from pyproject.toml, an npm package.json or a YAML file;
`project.version` / `project.homepage` in config take precedence.
"""

from __future__ import annotations
import json, tomllib, yaml
from pathlib import Path
from typing import Any, Dict
from palo.config import CFG, Config
from palo.errors import MetadataError
from palo.schemas import ProjectMeta

_URL_KEYS = ("Homepage", "homepage", "Repository", "repository", "Source", "source")

def _from_pyproject(data: Dict[str, Any]) -> Dict[str, Any]:
    project = data.get("project") or {}
    urls = project.get("urls") or {}
    homepage = next((urls[k] for k in _URL_KEYS if urls.get(k)), None)
    return {"version": project.get("version"), "homepage": homepage}

def read_metadata_file(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if not p.is_file():
        return {}
    suffix = p.suffix.lower()
    try:
        if suffix == ".toml":
            with p.open("rb") as f:
                return _from_pyproject(tomllib.load(f))
        if suffix == ".json":
            data = json.loads(p.read_text(encoding="utf-8"))
        elif suffix in (".yml", ".yaml"):
            data = yaml.safe_load(p.read_text(encoding="utf-8")) or {}
        else:
            raise MetadataError(f"unsupported metadata file: {p}")
    except (tomllib.TOMLDecodeError, json.JSONDecodeError, yaml.YAMLError) as e:
        raise MetadataError(f"cannot parse {p}: {e}") from e
    return {"version": data.get("version"), "homepage": data.get("homepage")}

def load_metadata(cfg: Config = CFG) -> ProjectMeta:
    path = cfg.get("project.metadata", "./pyproject.toml")
    found = read_metadata_file(path)
    version = cfg.get("project.version") or found.get("version")
    homepage = cfg.get("project.homepage") or found.get("homepage") or ""
    if not version:
        raise MetadataError(
            f"no project version found (looked in {path})",
            "declare a version in the metadata file or set project.version",
        )
    return ProjectMeta(version=str(version), homepage=str(homepage))
