# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations
import copy, os, re, yaml
from pathlib import Path
from typing import Any, Dict
from dotenv import load_dotenv

load_dotenv()

_ENV_PREFIX = "PATCHLOG_"

_DEFAULT_CONFIG_PATH = os.environ.get(_ENV_PREFIX + "CONFIG", "./patchlog.yml")

# advisory only: shown when a commit breaks the convention, never enforced
COMMIT_TYPES = [
    "fix",       # bug fix
    "update",    # backwards-compatible enhancement
    "new",       # new feature
    "breaking",  # backwards-incompatible enhancement or feature
    "docs",      # documentation only
    "build",     # build process only
    "upgrade",   # dependency upgrade
    "chore",     # refactoring, tests, anything not user-facing
]

_DEFAULTS = {
    "changelog": {"path": "./CHANGES.md"},
    "project": {"metadata": "./pyproject.toml", "version": None, "homepage": None},
    "vcs": {"type": "git", "repo": ".", "binary": "git"},
    "commits": {"types": list(COMMIT_TYPES)},
    "log": {"level": "INFO", "ops": None},
}

_ENV_PATTERN = re.compile(r"\$\{([^}:|]+)(?:\|([^}]*))?\}")

# ---------------- utils ----------------
def _deep_merge(a: Dict[str, Any], b: Dict[str, Any]) -> Dict[str, Any]:
    out = dict(a)
    for k, v in (b or {}).items():
        if isinstance(v, dict) and isinstance(out.get(k), dict):
            out[k] = _deep_merge(out[k], v)
        elif v is not None:
            out[k] = v
    return out

def _coerce(s: str) -> Any:
    low = s.lower()
    if low in {"true", "false"}:
        return low == "true"
    if s.isdigit():
        return int(s)
    try:
        return float(s)
    except ValueError:
        return s

def _subst_env(value: Any) -> Any:
    if not isinstance(value, str):
        return value
    def repl(m: re.Match) -> str:
        default = m.group(2) if m.group(2) is not None else ""
        return os.environ.get(m.group(1), default)
    return _ENV_PATTERN.sub(repl, value)

def _resolve_env_in_obj(obj: Any) -> Any:
    if isinstance(obj, dict):
        return {k: _resolve_env_in_obj(v) for k, v in obj.items()}
    if isinstance(obj, list):
        return [_resolve_env_in_obj(v) for v in obj]
    return _subst_env(obj)

def _env_to_dict(prefix: str = _ENV_PREFIX) -> Dict[str, Any]:
    # PATCHLOG_CHANGELOG__PATH=docs/CHANGES.md -> {"changelog": {"path": ...}}
    envmap: Dict[str, Any] = {}
    for k, v in os.environ.items():
        if not k.startswith(prefix) or k == prefix + "CONFIG":
            continue
        path = k[len(prefix):].lower().split("__")
        cur = envmap
        for part in path[:-1]:
            cur = cur.setdefault(part, {})
        cur[path[-1]] = _coerce(v)
    return envmap

def _load_yaml(path: str | Path) -> Dict[str, Any]:
    p = Path(path)
    if p.is_file():
        with p.open("r", encoding="utf-8") as f:
            return yaml.safe_load(f) or {}
    return {}

def load_dict(path: str | Path | None = None) -> Dict[str, Any]:
    """Defaults < YAML file < PATCHLOG_* environment."""
    file_cfg = _resolve_env_in_obj(_load_yaml(path or _DEFAULT_CONFIG_PATH))
    return _deep_merge(_deep_merge(copy.deepcopy(_DEFAULTS), file_cfg), _env_to_dict())

# --------------- wrapper ----------------
class Config:
    """
    Single backing dict addressed with dotted paths ("changelog.path").
    Built from a file path or from a pre-built dict.
    """
    def __init__(
            self,
            data: Dict[str, Any] | None = None,
            path: str | Path | None = None):
        if data is None:
            data = load_dict(path)
        self._cfg: Dict[str, Any] = dict(data)

    def get(self, path: str, default: Any = None) -> Any:
        cur: Any = self._cfg
        for part in path.split("."):
            if not isinstance(cur, dict) or part not in cur:
                return default
            cur = cur[part]
        return default if cur is None else cur

    def set(self, path: str, value: Any) -> None:
        cur = self._cfg
        parts = path.split(".")
        for p in parts[:-1]:
            nxt = cur.get(p)
            if not isinstance(nxt, dict):
                nxt = cur[p] = {}
            cur = nxt
        cur[parts[-1]] = value

    def snapshot(self) -> Dict[str, Any]:
        return copy.deepcopy(self._cfg)

    # replace all config in place, keeping object identity
    def replace(self, data: Dict[str, Any] | None = None,
                path: str | Path | None = None) -> None:
        fresh = Config(data=data, path=path)
        self._cfg.clear()
        self._cfg.update(fresh._cfg)

# --- singleton access (CLI + tests share this) ---
_CFG_SINGLETON = Config()

def get_cfg() -> Config:
    return _CFG_SINGLETON

def reload_cfg(path: str | None = None) -> Config:
    # hard reload from disk/env
    _CFG_SINGLETON.replace(path=path)
    return _CFG_SINGLETON

CFG = _CFG_SINGLETON
