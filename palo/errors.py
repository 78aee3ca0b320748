# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

"""
Fatal conditions of the changelog pipelines.

Every error carries a machine code, a human message and, when there is
an obvious fix, a suggestion. None of them is recovered locally: the CLI
logs them and exits non-zero before anything is written.
"""

from __future__ import annotations
from typing import Any, Iterable


class ChangelogError(Exception):
    """Base error with structured code + suggestion."""
    code = "changelog_error"

    def __init__(self, message: str, suggestion: str = "", detail: Any = None):
        self.message = message
        self.suggestion = suggestion
        self.detail = detail
        super().__init__(message)

    def to_dict(self) -> dict[str, Any]:
        d: dict[str, Any] = {"ok": False, "code": self.code, "error": self.message}
        if self.suggestion:
            d["suggestion"] = self.suggestion
        if self.detail:
            d["details"] = self.detail
        return d


class MalformedCommit(ChangelogError):
    code = "malformed_commit"

    def __init__(self, line: str, types: Iterable[str] = ()):
        self.line = line
        self.types = list(types)
        suggestion = "commit message must be of format: {type}: {message}"
        if self.types:
            suggestion += ", where type is one of: " + ", ".join(self.types)
        super().__init__(f"bad commit message: {line}", suggestion, {"line": line})


class ReleaseHeaderNotFound(ChangelogError):
    code = "release_header_not_found"

    def __init__(self, placeholder: str):
        self.placeholder = placeholder
        super().__init__(
            f"could not find changelog section for the last auto rev patch "
            f"version: {placeholder}",
            "run 'generate' before 'release'; only patch bumps over the last "
            "tag can be finalized",
            {"placeholder": placeholder},
        )


class ChangelogDrift(ChangelogError):
    code = "changelog_drift"

    def __init__(self, tag_versions: list[str], doc_versions: list[str],
                 message: str = "versions found in git do not match versions "
                                "found in changelog"):
        self.tag_versions = list(tag_versions)
        self.doc_versions = list(doc_versions)
        super().__init__(
            message,
            detail={"git": self.tag_versions, "changelog": self.doc_versions},
        )


class DuplicateVersion(ChangelogDrift):
    code = "duplicate_version"

    def __init__(self, duplicates: list[str], tag_versions: list[str],
                 doc_versions: list[str]):
        self.duplicates = list(duplicates)
        super().__init__(
            tag_versions, doc_versions,
            "changelog has duplicated sections: " + ", ".join(self.duplicates),
        )


class ExternalToolFailure(ChangelogError):
    code = "external_tool_failure"

    def __init__(self, cmd: list[str], reason: str):
        self.cmd = list(cmd)
        super().__init__(f"{' '.join(self.cmd)}: {reason}", detail={"cmd": self.cmd})


class MetadataError(ChangelogError):
    code = "metadata_error"


class DocumentError(ChangelogError):
    code = "document_error"


class ConfigError(ChangelogError):
    code = "config_error"
