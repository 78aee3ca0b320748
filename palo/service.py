# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations
import re
from datetime import date
from typing import List
from palo.commits import parse_commits
from palo.config import CFG, Config
from palo.document import (
    RELEASE_HEADER, parse_section, read_document, write_document,
)
from palo.errors import ReleaseHeaderNotFound
from palo.log import get_logger
from palo.metadata import load_metadata
from palo.render import render_section
from palo.schemas import ChangelogDocument, ProjectMeta
from palo.vcs.base import BaseVersionSource, trim_tag
from palo.vcs.factory import get_source
from palo.verify import verify_changelog

log = get_logger("service")

_LEADING_DIGITS = re.compile(r"\d+")

# Pure-ish document operations; the pipelines below own all I/O

def update_changelog(doc: ChangelogDocument, section_md: str,
                     pending_version: str) -> ChangelogDocument:
    """
    Prepend a freshly rendered section. A top section for the same pending
    version is a leftover of an earlier run and is replaced.
    """
    sections = list(doc.sections)
    top = doc.first()
    if top is not None and top.version == pending_version:
        sections = sections[1:]
    fresh = parse_section(section_md.removeprefix(RELEASE_HEADER))
    return doc.model_copy(update={"sections": (fresh, *sections)})

def bump_patch(version: str) -> str:
    """`1.0.0` -> `1.0.1`; pre-release suffixes drop (`1.0.0-rc.1` -> `1.0.1`)."""
    parts = trim_tag(version).split(".")
    patch = _LEADING_DIGITS.match(parts[2]) if len(parts) >= 3 else None
    if patch is None:
        raise ReleaseHeaderNotFound(f"<patch bump of {version}>")
    return ".".join([parts[0], parts[1], str(int(patch.group(0)) + 1)])

def finalize_release(doc: ChangelogDocument, last_tag: str | None,
                     version: str, today: date | None = None) -> ChangelogDocument:
    """
    Rename the placeholder section (last release + 1 patch) to the released
    version and stamp it with today's date. Without any previous release the
    placeholder is the released version itself.
    """
    placeholder = bump_patch(last_tag) if last_tag else version
    stamp = (today or date.today()).isoformat()
    sections = list(doc.sections)
    for i, section in enumerate(sections):
        if section.version != placeholder:
            continue
        nl = section.body.find("\n")
        rest = section.body[nl:] if nl >= 0 else ""
        sections[i] = section.model_copy(
            update={"version": version, "body": f" ({stamp}){rest}"})
        log.info("released %s as %s (%s)", placeholder, version, stamp)
        return doc.model_copy(update={"sections": tuple(sections)})
    raise ReleaseHeaderNotFound(placeholder)

def previous_release(tags: List[str], pending_version: str) -> str | None:
    """Newest tag that is not the version being prepared."""
    for tag in tags:
        if trim_tag(tag) != pending_version:
            return tag
    return None

# ---------------- pipelines ----------------

def _generate(doc: ChangelogDocument, source: BaseVersionSource,
              meta: ProjectMeta, cfg: Config) -> ChangelogDocument:
    since = previous_release(source.list_tags(), meta.version)
    lines = source.commits_since(since)
    commits = parse_commits(lines, meta.homepage, cfg.get("commits.types", []))
    log.info("%d commits since %s", len(commits), since or "the beginning")
    return update_changelog(doc, render_section(meta.version, commits), meta.version)

def run_generate(cfg: Config = CFG,
                 source: BaseVersionSource | None = None) -> ChangelogDocument:
    source = source or get_source(cfg)
    meta = load_metadata(cfg)
    path = cfg.get("changelog.path", "./CHANGES.md")
    doc = _generate(read_document(path), source, meta, cfg)
    verify_changelog(doc, source.list_tags(trim_prefix=True))
    write_document(path, doc)
    log.info("%s updated for %s", path, meta.version)
    return doc

def run_release(cfg: Config = CFG, source: BaseVersionSource | None = None,
                today: date | None = None) -> ChangelogDocument:
    source = source or get_source(cfg)
    meta = load_metadata(cfg)
    path = cfg.get("changelog.path", "./CHANGES.md")
    doc = _generate(read_document(path), source, meta, cfg)
    last_tag = previous_release(source.list_tags(), meta.version)
    doc = finalize_release(doc, last_tag, meta.version, today)
    verify_changelog(doc, source.list_tags(trim_prefix=True))
    write_document(path, doc)
    log.info("%s released as %s", path, meta.version)
    return doc

def run_verify(cfg: Config = CFG,
               source: BaseVersionSource | None = None) -> ChangelogDocument:
    source = source or get_source(cfg)
    doc = read_document(cfg.get("changelog.path", "./CHANGES.md"))
    verify_changelog(doc, source.list_tags(trim_prefix=True))
    return doc
