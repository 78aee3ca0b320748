# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations
from typing import Dict, Iterable, List
from palo.document import COMMIT_TYPE_HEADER, RELEASE_HEADER
from palo.schemas import CommitRecord

def group_by_type(commits: Iterable[CommitRecord]) -> Dict[str, List[CommitRecord]]:
    groups: Dict[str, List[CommitRecord]] = {}
    for c in commits:
        groups.setdefault(c.commit_type, []).append(c)
    return groups

def _capcase(s: str) -> str:
    return s[:1].upper() + s[1:]

def render_section(version: str, commits: Iterable[CommitRecord]) -> str:
    """
    Markdown for one release: header, then one `#### Type` block per commit
    type in lexical order. Entries keep their input (newest-first) order.
    """
    groups = group_by_type(commits)
    out = [RELEASE_HEADER + version + "\n"]
    for ctype in sorted(groups):
        out.append("\n" + COMMIT_TYPE_HEADER + _capcase(ctype) + "\n\n")
        for c in groups[ctype]:
            out.append(f"* {c.message} ([{c.short_id}]({c.url}))\n")
    return "".join(out)
