# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

import pytest
from palo.commits import is_semver, parse_commit, parse_commits
from palo.errors import MalformedCommit

HOME = "https://example.org/acme/widget"

def test_parse_lowercases_type_and_builds_url():
    rec = parse_commit("ba14b5e Upgrade: commit new deps", HOME)
    assert rec.commit_id == "ba14b5e"
    assert rec.commit_type == "upgrade"
    assert rec.message == "commit new deps"
    assert rec.url == HOME + "/commit/ba14b5e"
    assert rec.url.endswith("/commit/ba14b5e")

def test_homepage_trailing_slash_not_doubled():
    rec = parse_commit("abc123 fix: x", HOME + "/")
    assert rec.url == HOME + "/commit/abc123"

def test_message_keeps_later_colons():
    rec = parse_commit("abc123 docs: usage: run `palo generate`", HOME)
    assert rec.commit_type == "docs"
    assert rec.message == "usage: run `palo generate`"

def test_unknown_types_are_accepted():
    rec = parse_commit("abc123 Wibble: something odd", HOME)
    assert rec.commit_type == "wibble"

def test_short_id_is_seven_chars():
    sha = "0123456789abcdef0123456789abcdef01234567"
    rec = parse_commit(f"{sha} fix: thing", HOME)
    assert rec.short_id == "0123456"

def test_release_commits_are_skipped():
    assert parse_commit("abc123 1.4.2", HOME) is None
    assert parse_commits(["abc123 2.0.0", "def456 fix: a"], HOME)[0].commit_id == "def456"

def test_missing_colon_is_fatal():
    with pytest.raises(MalformedCommit) as ei:
        parse_commits(["def456 new: add retry", "abc123 oops no colon here"], HOME,
                      types=["fix", "new"])
    err = ei.value
    assert err.line == "abc123 oops no colon here"
    assert err.code == "malformed_commit"
    assert "{type}: {message}" in err.suggestion
    assert "fix, new" in err.suggestion

def test_line_without_subject_is_fatal():
    with pytest.raises(MalformedCommit):
        parse_commits(["abc123"], HOME)

def test_blank_lines_ignored_and_order_kept():
    recs = parse_commits(["", "abc123 fix: null check", "  ", "def456 new: add retry"], HOME)
    assert [r.commit_id for r in recs] == ["abc123", "def456"]

@pytest.mark.parametrize("token,expected", [
    ("1.0.0", True),
    ("10.20.30", True),
    ("1.0.0-beta", True),
    ("1.0", False),
    ("1.0.0.1", False),
    ("v1.0.0", False),
    ("fix:", False),
    ("", False),
])
def test_is_semver(token, expected):
    assert is_semver(token) is expected
