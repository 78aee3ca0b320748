# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

import json
import pytest
from palo.config import get_cfg, reload_cfg
from palo.log import reconfigure

HOMEPAGE = "https://example.org/acme/widget"

@pytest.fixture(autouse=True)
def _reset_cfg_between_tests(monkeypatch, tmp_path):
    for k in ("PATCHLOG_CHANGELOG__PATH", "PATCHLOG_PROJECT__VERSION",
              "PATCHLOG_VCS__TYPE", "PATCHLOG_LOG__OPS"):
        monkeypatch.delenv(k, raising=False)
    reload_cfg(str(tmp_path / "missing.yml"))
    reconfigure()
    yield

@pytest.fixture()
def project(tmp_path):
    """A package.json-driven project with an empty changelog location."""
    def _make(version="1.0.1", changelog=None):
        meta = tmp_path / "package.json"
        meta.write_text(json.dumps({"version": version, "homepage": HOMEPAGE}),
                        encoding="utf-8")
        changes = tmp_path / "CHANGES.md"
        if changelog is not None:
            changes.write_text(changelog, encoding="utf-8")
        cfg = get_cfg()
        cfg.set("project.metadata", str(meta))
        cfg.set("changelog.path", str(changes))
        return cfg, changes
    return _make
