# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations
from abc import ABC, abstractmethod
from typing import List


def trim_tag(tag: str) -> str:
    """Drop one leading non-numeric marker, e.g. `v1.2.0` -> `1.2.0`."""
    if tag and not tag[0].isdigit():
        return tag[1:]
    return tag


class BaseVersionSource(ABC):
    @abstractmethod
    def list_tags(self, trim_prefix: bool = False) -> List[str]:
        """Release tags, newest first (semantic-version order)."""

    @abstractmethod
    def commits_since(self, tag: str | None) -> List[str]:
        """Raw `{id} {subject}` lines after `tag`, newest first, minus HEAD."""
