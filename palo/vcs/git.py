# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from __future__ import annotations
import subprocess
from typing import List
from palo.errors import ExternalToolFailure
from palo.log import get_logger
from palo.vcs.base import BaseVersionSource, trim_tag

log = get_logger("vcs")

class GitSource(BaseVersionSource):
    def __init__(self, repo: str = ".", binary: str = "git"):
        self.repo = repo
        self.binary = binary

    def sh(self, *args: str) -> str:
        cmd = [self.binary, *args]
        log.debug("running %s in %s", " ".join(cmd), self.repo)
        try:
            return subprocess.check_output(
                cmd, cwd=self.repo, text=True, encoding="utf-8",
                stderr=subprocess.PIPE,
            )
        except FileNotFoundError as e:
            raise ExternalToolFailure(cmd, f"not found ({e.strerror})") from e
        except UnicodeDecodeError as e:
            raise ExternalToolFailure(cmd, f"output is not valid UTF-8 ({e.reason})") from e
        except subprocess.CalledProcessError as e:
            reason = (e.stderr or "").strip() or f"exit status {e.returncode}"
            raise ExternalToolFailure(cmd, reason) from e

    def _lines(self, *args: str) -> List[str]:
        return [l.strip() for l in self.sh(*args).splitlines() if l.strip()]

    def list_tags(self, trim_prefix: bool = False) -> List[str]:
        # git sorts ascending; callers want the newest release first
        tags = self._lines("tag", "--sort", "version:refname")
        tags.reverse()
        if trim_prefix:
            tags = [trim_tag(t) for t in tags]
        return tags

    def commits_since(self, tag: str | None) -> List[str]:
        rev = f"{tag}..HEAD" if tag else "HEAD"
        lines = self._lines("log", rev, "--format=%H %s")
        # newest entry is the release-bump commit itself
        return lines[1:]
