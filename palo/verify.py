# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations
from collections import Counter
from typing import Iterable
from palo.errors import ChangelogDrift, DuplicateVersion
from palo.log import get_logger
from palo.schemas import ChangelogDocument

log = get_logger("verify")

def verify_changelog(doc: ChangelogDocument, tag_versions: Iterable[str]) -> None:
    """
    Released versions in git (prefix-stripped tags) must be exactly the
    versions recorded in the changelog, each recorded once.
    """
    git_versions = list(tag_versions)
    doc_versions = doc.versions()

    dupes = sorted(v for v, n in Counter(doc_versions).items() if n > 1)
    if dupes:
        log.error("changelog has duplicated sections: %s", dupes)
        raise DuplicateVersion(dupes, git_versions, doc_versions)

    if (len(git_versions) != len(doc_versions)
            or set(git_versions) ^ set(doc_versions)):
        log.warning("versions found in git do not match versions found in changelog!")
        log.error("git versions: %s", git_versions)
        log.error("changelog versions: %s", doc_versions)
        raise ChangelogDrift(git_versions, doc_versions)

    log.debug("changelog matches %d git tags", len(git_versions))
