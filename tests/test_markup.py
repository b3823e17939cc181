"""Tests for distill.content.markup — strip rules and whitespace normalization."""

from __future__ import annotations

import itertools
import re

import pytest

from distill.content.markup import (
    DEFAULT_RULES,
    StripRule,
    normalize_whitespace,
    strip_markup,
    tag_rule,
)

from .conftest import STEPS_BODY


def _rule(name: str) -> StripRule:
    return next(r for r in DEFAULT_RULES if r.name == name)


class TestStripRule:
    """StripRule — frozen pattern/replacement pair."""

    def test_frozen(self) -> None:
        rule = StripRule("x", re.compile("x"))
        with pytest.raises(AttributeError):
            rule.name = "y"  # type: ignore[misc]

    def test_apply_replaces_every_match(self) -> None:
        rule = StripRule("digits", re.compile(r"\d"), "#")
        assert rule.apply("a1b22") == "a#b##"

    def test_default_rule_names(self) -> None:
        assert [r.name for r in DEFAULT_RULES] == [
            "starlight-imports",
            "steps",
            "tabs",
            "tab-items",
            "twoslash-directives",
        ]


class TestImportRule:
    """Imports from the Starlight components module are removed with their line."""

    def test_removes_whole_line(self) -> None:
        body = "import { Steps, Tabs } from '@astrojs/starlight/components';\n\nText"
        assert _rule("starlight-imports").apply(body) == "\nText"

    def test_double_quotes_without_semicolon(self) -> None:
        body = 'import { Tabs } from "@astrojs/starlight/components"\nText'
        assert _rule("starlight-imports").apply(body) == "Text"

    def test_trailing_comment_removed_with_line(self) -> None:
        body = "import { Steps } from '@astrojs/starlight/components'; // @noErrors\nText"
        assert _rule("starlight-imports").apply(body) == "Text"

    def test_does_not_reach_following_lines(self) -> None:
        body = "import { Steps } from '@astrojs/starlight/components';\n   \n<Steps>\n"
        assert _rule("starlight-imports").apply(body) == "   \n<Steps>\n"

    def test_import_at_end_of_body(self) -> None:
        body = "Text\nimport { Steps } from '@astrojs/starlight/components';"
        assert _rule("starlight-imports").apply(body) == "Text\n"

    def test_other_modules_untouched(self) -> None:
        body = "import { useForm } from '@formwerk/core';\n"
        assert strip_markup(body) == body


class TestTagRules:
    """Paired component tags lose their tags but keep the content."""

    def test_steps(self) -> None:
        assert strip_markup("<Steps>\n1. One\n2. Two\n</Steps>") == "\n1. One\n2. Two\n"

    def test_tabs_with_attributes(self) -> None:
        body = '<Tabs syncKey="pkg">\n<TabItem label="npm">\nnpm i\n</TabItem>\n</Tabs>'
        assert strip_markup(body) == "\n\nnpm i\n\n"

    def test_tab_item_rule_only_touches_tab_items(self) -> None:
        body = "<Tabs>\n<TabItem label=\"a\">A</TabItem>\n</Tabs>"
        assert _rule("tab-items").apply(body) == "<Tabs>\nA\n</Tabs>"

    def test_unterminated_tag_is_stripped_alone(self) -> None:
        assert strip_markup("<Steps>\n1. One\n") == "\n1. One\n"

    def test_closing_tag_without_opening(self) -> None:
        assert strip_markup("Text</Tabs>") == "Text"

    def test_similar_tag_names_untouched(self) -> None:
        body = "<StepsOverview /> <Card>x</Card>"
        assert strip_markup(body) == body

    def test_tag_rule_factory(self) -> None:
        rule = tag_rule("cards", "Card")
        assert rule.apply('<Card title="x">body</Card>') == "body"


class TestTwoslashRule:
    """Twoslash directive comments are removed to the end of the line."""

    @pytest.mark.parametrize(
        "line",
        ["// @noErrors", "//@noErrors", "// @errors: 2322", "// @", "//   @filename: a.ts"],
    )
    def test_removes_directive(self, line: str) -> None:
        body = f"```ts\n{line}\nconst a = 1;\n```"
        assert strip_markup(body) == "```ts\n\nconst a = 1;\n```"

    def test_trailing_directive(self) -> None:
        assert strip_markup("const a = 1; // @noErrors\nnext") == "const a = 1; \nnext"

    def test_plain_comments_untouched(self) -> None:
        body = "// keep me\nconst a = 1;"
        assert strip_markup(body) == body


class TestStripMarkup:
    """strip_markup — rule application as a whole."""

    @pytest.mark.parametrize(
        "body",
        [
            "import { Steps } from '@astrojs/starlight/components';\n"
            "Intro.\n"
            "<Steps>\n```ts\n// @noErrors\nrun();\n```\n</Steps>\n"
            "<Tabs>\n<TabItem label=\"a\">A</TabItem>\n</Tabs>\n",
            "import { Steps } from '@astrojs/starlight/components';\n<Steps>\n1. One\n</Steps>\n",
            "import { Steps } from '@astrojs/starlight/components'; // @noErrors\n"
            "\n<Steps>\nx\n</Steps>",
            "import { Steps } from '@astrojs/starlight/components';\n  \n<Steps>\n",
            "//\n@noErrors\n<Tabs>\n",
            "Intro\nimport X from '@astrojs/starlight/components'; // @noErrors\nNext",
        ],
    )
    def test_rule_order_does_not_matter(self, body: str) -> None:
        expected = strip_markup(body)
        for order in itertools.permutations(DEFAULT_RULES):
            assert strip_markup(body, order) == expected

    def test_import_with_directive_comment(self) -> None:
        body = "Intro\nimport X from '@astrojs/starlight/components'; // @noErrors\nNext"
        assert strip_markup(body) == "Intro\nNext"
        assert strip_markup(body, reversed(DEFAULT_RULES)) == "Intro\nNext"

    def test_import_then_tag_keeps_line_structure(self) -> None:
        body = "import { Steps } from '@astrojs/starlight/components';\n<Steps>\n1. One\n</Steps>\n"
        assert strip_markup(body) == "\n1. One\n\n"

    def test_custom_rules(self) -> None:
        rules = (StripRule("asides", re.compile(r"</?Aside[^>]*>")),)
        assert strip_markup("<Aside type=\"tip\">Hi</Aside>", rules) == "Hi"

    def test_no_rules(self) -> None:
        assert strip_markup("<Steps>x</Steps>", ()) == "<Steps>x</Steps>"

    def test_scenario_body(self) -> None:
        stripped = strip_markup(STEPS_BODY)
        assert "@astrojs/starlight/components" not in stripped
        assert "<Steps>" not in stripped
        assert "1. Do a thing" in stripped


class TestNormalizeWhitespace:
    """normalize_whitespace — collapse blank-line runs, trim the ends."""

    def test_collapses_runs(self) -> None:
        assert normalize_whitespace("a\n\n\n\nb") == "a\n\nb"

    def test_collapses_runs_with_spaces(self) -> None:
        assert normalize_whitespace("a\n  \n\t\n  \nb") == "a\n\nb"

    def test_keeps_single_blank_line(self) -> None:
        assert normalize_whitespace("a\n\nb\nc") == "a\n\nb\nc"

    def test_trims(self) -> None:
        assert normalize_whitespace("\n\n  a  \n\n") == "a"

    def test_empty(self) -> None:
        assert normalize_whitespace("") == ""
        assert normalize_whitespace("\n\n\n") == ""

    @pytest.mark.parametrize(
        "text",
        [
            "a\n\n\n\nb",
            "a\n \n \n \nb\n\n\nc",
            "  lead\n\n\n  \n trail  \n\n\n",
            "x\n\n\n \ty",
            STEPS_BODY,
        ],
    )
    def test_idempotent(self, text: str) -> None:
        once = normalize_whitespace(text)
        assert normalize_whitespace(once) == once
