# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from palo.config import COMMIT_TYPES, Config, get_cfg, reload_cfg

def test_defaults_present():
    cfg = get_cfg()
    assert cfg.get("changelog.path") == "./CHANGES.md"
    assert cfg.get("vcs.type") == "git"
    assert cfg.get("commits.types") == COMMIT_TYPES
    assert cfg.get("project.version") is None
    assert cfg.get("project.version", "x") == "x"

def test_overlay_get_set_snapshot():
    cfg = get_cfg()
    cfg.set("changelog.path", "docs/CHANGES.md")
    cfg.set("vcs.repo", "/srv/repo")
    assert cfg.get("changelog.path") == "docs/CHANGES.md"
    snap = cfg.snapshot()
    assert snap["vcs"]["repo"] == "/srv/repo"
    snap["vcs"]["repo"] = "elsewhere"
    assert cfg.get("vcs.repo") == "/srv/repo"

def test_set_does_not_leak_into_fresh_configs(tmp_path):
    get_cfg().set("vcs.binary", "/opt/git")
    fresh = Config(path=tmp_path / "missing.yml")
    assert fresh.get("vcs.binary") == "git"

def test_yaml_file_and_env_substitution(tmp_path, monkeypatch):
    monkeypatch.setenv("CHANGES_DIR", "docs")
    conf = tmp_path / "patchlog.yml"
    conf.write_text(
        "changelog:\n  path: ${CHANGES_DIR}/CHANGES.md\n"
        "vcs:\n  binary: ${GIT_BIN|git}\n",
        encoding="utf-8",
    )
    monkeypatch.delenv("GIT_BIN", raising=False)
    cfg = reload_cfg(str(conf))
    assert cfg.get("changelog.path") == "docs/CHANGES.md"
    assert cfg.get("vcs.binary") == "git"
    assert cfg.get("vcs.type") == "git"

def test_env_overrides_file(tmp_path, monkeypatch):
    conf = tmp_path / "patchlog.yml"
    conf.write_text("changelog:\n  path: from-file.md\n", encoding="utf-8")
    monkeypatch.setenv("PATCHLOG_CHANGELOG__PATH", "from-env.md")
    monkeypatch.setenv("PATCHLOG_LOG__OPS", "stdout")
    cfg = reload_cfg(str(conf))
    assert cfg.get("changelog.path") == "from-env.md"
    assert cfg.get("log.ops") == "stdout"

def test_reload_keeps_identity(tmp_path):
    cfg = get_cfg()
    assert reload_cfg(str(tmp_path / "missing.yml")) is cfg
