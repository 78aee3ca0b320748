# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from typing import List
from palo.vcs.base import BaseVersionSource, trim_tag


class FakeSource(BaseVersionSource):
    """In-memory tags and log. `log` is newest first and includes HEAD."""
    def __init__(self, tags=None, log=None):
        self.tags = list(tags or [])   # ascending, as git sorts them
        self.log = list(log or [])
        self.calls = []

    def list_tags(self, trim_prefix: bool = False) -> List[str]:
        self.calls.append(("list_tags", trim_prefix))
        tags = list(reversed(self.tags))
        return [trim_tag(t) for t in tags] if trim_prefix else tags

    def commits_since(self, tag) -> List[str]:
        self.calls.append(("commits_since", tag))
        return self.log[1:]
