"""Tests for YAML frontmatter detection and decoding."""

import json
import re

import pytest

from context_cli.errors import FrontmatterDecodeError
from context_cli.frontmatter import (
    Frontmatter,
    exclude_frontmatter,
    has_frontmatter,
    parse_frontmatter,
)

FM_CONTENT = """---
title: "testing"
foo: 42
bar: "bar"
baz: "baz"
---

# With Frontmatter

Hello World
"""


class TestHasFrontmatter:
    def test_heading_only_has_none(self):
        assert has_frontmatter("# Hello") is False

    def test_detects_multi_line_block(self):
        assert has_frontmatter(FM_CONTENT) is True

    def test_detects_single_line_block(self):
        assert has_frontmatter("---\ntitle: x\n---\nBody") is True

    def test_detects_empty_block(self):
        assert has_frontmatter("---\n---\nBody") is True

    def test_detects_block_at_end_of_text(self):
        assert has_frontmatter("---\ntitle: x\n---") is True

    def test_accepts_crlf_line_endings(self):
        assert has_frontmatter("---\r\ntitle: x\r\n---\r\nBody") is True

    def test_ignored_when_not_first_line(self):
        assert has_frontmatter("\n---\ntitle: x\n---\nBody") is False

    def test_requires_closing_delimiter(self):
        assert has_frontmatter("---\ntitle: x\nBody") is False

    def test_horizontal_rule_is_not_a_delimiter(self):
        assert has_frontmatter("----\ntitle: x\n----\n") is False

    def test_pattern_can_be_injected(self):
        plus_delimited = re.compile(r"\A\+\+\+\n(?P<body>.*?)\n\+\+\+\n", re.DOTALL)

        assert has_frontmatter("+++\ntitle: x\n+++\nBody", plus_delimited) is True
        assert has_frontmatter(FM_CONTENT, plus_delimited) is False


class TestExcludeFrontmatter:
    def test_identity_without_frontmatter(self):
        raw = "# Hello\n\nWorld"

        assert exclude_frontmatter(raw) == raw

    def test_keeps_leading_blank_lines_of_body(self):
        assert exclude_frontmatter(FM_CONTENT) == "\n# With Frontmatter\n\nHello World\n"

    def test_result_has_no_frontmatter(self):
        assert has_frontmatter(exclude_frontmatter(FM_CONTENT)) is False

    def test_block_at_end_of_text_leaves_empty_body(self):
        assert exclude_frontmatter("---\ntitle: x\n---") == ""


class TestParseFrontmatter:
    def test_parses_recognized_and_other_fields(self):
        fm = parse_frontmatter(FM_CONTENT)

        assert fm.title == "testing"
        assert fm.other == {"foo": 42, "bar": "bar", "baz": "baz"}

    def test_parses_list_fields(self):
        fm = parse_frontmatter("---\ntags: [one, two]\naliases:\n  - alt\n---\n")

        assert fm.tags == ["one", "two"]
        assert fm.aliases == ["alt"]

    def test_requires_auth_uses_camel_case_key(self):
        fm = parse_frontmatter("---\nrequiresAuth: true\n---\n")

        assert fm.requires_auth is True
        assert "requiresAuth" not in fm.other

    def test_empty_block_gives_empty_frontmatter(self):
        fm = parse_frontmatter("---\n---\nBody")

        assert fm == Frontmatter()

    def test_raises_without_block(self):
        with pytest.raises(FrontmatterDecodeError):
            parse_frontmatter("# Hello")

    def test_raises_on_invalid_yaml(self):
        with pytest.raises(FrontmatterDecodeError, match="YAML"):
            parse_frontmatter("---\ntitle: [oops\n---\nBody\n")

    def test_raises_when_not_a_mapping(self):
        with pytest.raises(FrontmatterDecodeError, match="mapping"):
            parse_frontmatter("---\n- one\n- two\n---\n")

    def test_raises_on_mistyped_recognized_field(self):
        with pytest.raises(FrontmatterDecodeError, match="title"):
            parse_frontmatter("---\ntitle: 42\n---\n")

    def test_does_not_coerce_bool(self):
        with pytest.raises(FrontmatterDecodeError):
            parse_frontmatter('---\nrequiresAuth: "yes"\n---\n')

    def test_does_not_coerce_string_to_list(self):
        with pytest.raises(FrontmatterDecodeError):
            parse_frontmatter("---\ntags: single\n---\n")

    def test_snake_case_requires_auth_is_unrecognized(self):
        fm = parse_frontmatter('---\nrequires_auth: "yes"\n---\n')

        assert fm.requires_auth is None
        assert fm.other == {"requires_auth": "yes"}

    def test_both_spellings_of_requires_auth_are_kept(self):
        fm = parse_frontmatter("---\nrequiresAuth: true\nrequires_auth: false\n---\n")

        assert fm.requires_auth is True
        assert fm.to_dict() == {"requiresAuth": True, "requires_auth": False}

    def test_non_string_keys_become_strings(self):
        fm = parse_frontmatter("---\n2024-01-01: launched\n7: seven\n---\n")

        assert fm.other == {"2024-01-01": "launched", "7": "seven"}

    def test_nested_non_string_keys_become_strings(self):
        fm = parse_frontmatter("---\nreleases:\n  2024-01-01: launched\n---\n")

        assert fm.other == {"releases": {"2024-01-01": "launched"}}

    def test_unrecognized_keys_keep_any_type(self):
        fm = parse_frontmatter("---\nnested:\n  a: 1\nflag: false\nitems: [1, 2]\n---\n")

        assert fm.other == {"nested": {"a": 1}, "flag": False, "items": [1, 2]}


class TestFrontmatterSerialization:
    def test_to_dict_flattens_other(self):
        fm = parse_frontmatter(FM_CONTENT)

        assert fm.to_dict() == {"title": "testing", "foo": 42, "bar": "bar", "baz": "baz"}

    def test_to_dict_omits_unset_fields(self):
        assert Frontmatter().to_dict() == {}

    def test_to_dict_uses_camel_case_aliases(self):
        fm = Frontmatter(requires_auth=False)

        assert fm.to_dict() == {"requiresAuth": False}

    def test_recognized_keys_are_not_duplicated(self):
        fm = Frontmatter(title="typed", other={"title": "shadow", "extra": 1})

        assert fm.to_dict() == {"title": "typed", "extra": 1}

    def test_str_handles_date_keys_and_values(self):
        fm = parse_frontmatter("---\n2024-01-01: launched\npublished: 2024-02-01\n---\n")

        assert json.loads(str(fm)) == {"2024-01-01": "launched", "published": "2024-02-01"}

    def test_str_is_json(self):
        fm = parse_frontmatter(FM_CONTENT)

        assert json.loads(str(fm))["title"] == "testing"

    def test_from_mapping_routes_other_key_into_other(self):
        fm = Frontmatter.from_mapping({"name": "n", "other": "value"})

        assert fm.name == "n"
        assert fm.other == {"other": "value"}
