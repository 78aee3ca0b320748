# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations
import re
from typing import Iterable, List
from palo.errors import MalformedCommit
from palo.schemas import CommitRecord

_LEADING_DIGIT = re.compile(r"\d")

def is_semver(token: str | None) -> bool:
    """Duck-typed: three dot-separated parts, each starting with a digit."""
    if not token:
        return False
    parts = token.split(".")
    return len(parts) == 3 and all(_LEADING_DIGIT.match(p) for p in parts)

def commit_url(homepage: str, commit_id: str) -> str:
    return f"{(homepage or '').rstrip('/')}/commit/{commit_id}"

def parse_commit(line: str, homepage: str,
                 types: Iterable[str] = ()) -> CommitRecord | None:
    """
    Parse one `{id} {type}: {message}` log line. Returns None for release
    commits (subject is a bare version such as `1.4.2`).
    """
    fields = line.strip().split(None, 1)
    if not fields:
        return None
    commit_id = fields[0]
    remainder = fields[1] if len(fields) > 1 else ""
    words = remainder.split(None, 1)
    if words and is_semver(words[0]):
        return None
    ctype, colon, message = remainder.partition(":")
    if not colon or not ctype.strip():
        raise MalformedCommit(line, types)
    return CommitRecord(
        commit_id=commit_id,
        commit_type=ctype.strip().lower(),
        message=message.strip(),
        url=commit_url(homepage, commit_id),
    )

def parse_commits(lines: Iterable[str], homepage: str,
                  types: Iterable[str] = ()) -> List[CommitRecord]:
    """All-or-nothing: the first malformed line aborts the whole batch."""
    types = list(types)
    records: List[CommitRecord] = []
    for line in lines:
        rec = parse_commit(line, homepage, types)
        if rec is not None:
            records.append(rec)
    return records
