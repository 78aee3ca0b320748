# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

"""Pydantic models shared by the changelog pipelines."""

from pydantic import BaseModel, ConfigDict

SHORT_ID_LEN = 7


class CommitRecord(BaseModel):
    """One parsed `{id} {type}: {message}` commit."""
    model_config = ConfigDict(frozen=True)

    commit_id: str
    commit_type: str
    message: str
    url: str

    @property
    def short_id(self) -> str:
        return self.commit_id[:SHORT_ID_LEN]


class ProjectMeta(BaseModel):
    """Declared project version (pending release) and homepage."""
    version: str
    homepage: str = ""


class VersionSection(BaseModel):
    """One `## ` section: its version word and the raw text after it."""
    model_config = ConfigDict(frozen=True)

    version: str
    body: str = ""


class ChangelogDocument(BaseModel):
    """Sections newest first, plus any text before the first release header."""
    model_config = ConfigDict(frozen=True)

    preamble: str | None = None
    sections: tuple[VersionSection, ...] = ()

    def versions(self) -> list[str]:
        return [s.version for s in self.sections]

    def first(self) -> VersionSection | None:
        return self.sections[0] if self.sections else None
