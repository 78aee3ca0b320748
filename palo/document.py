# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations
import re
from pathlib import Path
from palo.errors import DocumentError
from palo.schemas import ChangelogDocument, VersionSection

RELEASE_HEADER = "## "
COMMIT_TYPE_HEADER = "#### "

_SEPARATOR = "\n" + RELEASE_HEADER
_VERSION_WORD = re.compile(r"\S*")

def parse_section(segment: str) -> VersionSection:
    """Segment text without its leading `## `: first word is the version."""
    version = _VERSION_WORD.match(segment).group(0)
    return VersionSection(version=version, body=segment[len(version):])

def parse_document(text: str) -> ChangelogDocument:
    """
    Split on release headers. The first segment still carries its own
    `## ` prefix (nothing precedes it to split on); anything before the
    first header is kept as the preamble.
    """
    if not text:
        return ChangelogDocument()
    segments = text.split(_SEPARATOR)
    head = segments[0]
    if head.startswith(RELEASE_HEADER):
        preamble = None
        segments[0] = head[len(RELEASE_HEADER):]
    else:
        preamble = head
        segments = segments[1:]
    return ChangelogDocument(
        preamble=preamble,
        sections=tuple(parse_section(s) for s in segments),
    )

def serialize_section(section: VersionSection) -> str:
    return RELEASE_HEADER + section.version + section.body

def serialize_document(doc: ChangelogDocument) -> str:
    text = "\n".join(serialize_section(s) for s in doc.sections)
    if doc.preamble is None:
        return text
    return doc.preamble + "\n" + text if doc.sections else doc.preamble

def read_document(path: str | Path) -> ChangelogDocument:
    p = Path(path)
    if not p.is_file():
        return ChangelogDocument()
    try:
        text = p.read_text(encoding="utf-8")
    except UnicodeDecodeError as e:
        raise DocumentError(f"{p} is not valid UTF-8: {e}",
                            "re-save the changelog as UTF-8") from e
    return parse_document(text)

def write_document(path: str | Path, doc: ChangelogDocument) -> None:
    Path(path).write_text(serialize_document(doc), encoding="utf-8")
