# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations
from .base import BaseVersionSource
from ..config import CFG, Config
from ..errors import ConfigError

def get_source(cfg: Config = CFG) -> BaseVersionSource:
    vtype = (cfg.get("vcs.type", "git") or "git").lower()
    match vtype:
        case "git":
            from .git import GitSource
            return GitSource(repo=str(cfg.get("vcs.repo", ".")),
                             binary=str(cfg.get("vcs.binary", "git")))
        case _:
            raise ConfigError(f"Unknown vcs.type: {vtype}", "supported: git")
