# (C) 2025 Rodrigo Rodrigues da Silva <rodrigopitanga@posteo.net>
# SPDX-License-Identifier: GPL-3.0-or-later

from palo.commits import parse_commits
from palo.render import render_section

HOME = "https://example.org/acme/widget"

def _commits(*lines):
    return parse_commits(lines, HOME)

def test_sections_in_lexical_type_order():
    md = render_section("1.2.0", _commits("abc123 fix: null check", "def456 new: add retry"))
    assert md == (
        "## 1.2.0\n"
        "\n#### Fix\n\n"
        f"* null check ([abc123]({HOME}/commit/abc123))\n"
        "\n#### New\n\n"
        f"* add retry ([def456]({HOME}/commit/def456))\n"
    )
    assert md.index("#### Fix") < md.index("#### New")

def test_output_independent_of_type_arrival_order():
    a = _commits("abc123 fix: null check", "def456 new: add retry", "aaa111 chore: tidy")
    assert render_section("1.2.0", a) == render_section("1.2.0", list(reversed(a)))

def test_entries_keep_input_order_within_a_type():
    md = render_section("1.2.0", _commits("bbb222 fix: second", "aaa111 fix: first"))
    assert md.index("second") < md.index("first")

def test_empty_commit_set_renders_header_only():
    assert render_section("1.2.0", []) == "## 1.2.0\n"

def test_type_name_capcased_rest_untouched():
    md = render_section("1.2.0", _commits("abc123 breaking-api: drop v1"))
    assert "#### Breaking-api\n" in md
