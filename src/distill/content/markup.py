"""Markup stripping — remove presentation-only MDX constructs from a body.

Starlight pages mix prose with component markup that only matters in the
browser: component imports, ``<Steps>`` / ``<Tabs>`` / ``<TabItem>``
wrappers, and Twoslash directives inside code samples.  Each construct is
described by a :class:`StripRule`; the rules are independent regex
substitutions confined to the line they match, so the order they run in
does not change the result.  An import statement is removed together with
its line break; blank lines around it are left to :func:`normalize_whitespace`.

Tag rules remove only the opening and closing tags.  Whatever the tags wrap
stays in place.  Tag balance is never checked: an unterminated ``<Steps>``
loses its opening tag and nothing else.  Nested tags of the same kind are
not treated specially; each tag is removed on its own.
"""

from __future__ import annotations

import re
from collections.abc import Iterable
from dataclasses import dataclass

# Module that provides Starlight's documentation components
COMPONENTS_MODULE = "@astrojs/starlight/components"

# Three or more newlines, possibly separated by other whitespace
_BLANK_RUN = re.compile(r"\n\s*\n\s*\n")


@dataclass(frozen=True, slots=True)
class StripRule:
    """A single pattern -> replacement text substitution.

    Attributes:
        name: Short identifier, used in tests and diagnostics.
        pattern: Compiled regular expression to remove.
        replacement: Text substituted for every match.

    """

    name: str
    pattern: re.Pattern[str]
    replacement: str = ""

    def apply(self, text: str) -> str:
        """Return *text* with every match of this rule replaced."""
        return self.pattern.sub(self.replacement, text)


def tag_rule(name: str, tag: str) -> StripRule:
    """Build a rule removing ``<tag ...>`` and ``</tag>`` but keeping the content."""
    return StripRule(name, re.compile(rf"<{tag}\b[^>]*>|</{tag}>"))


# Horizontal whitespace only, so no rule reaches past the end of its line
_HSPACE = r"[^\S\n]"

DEFAULT_RULES: tuple[StripRule, ...] = (
    # The whole import line with its line break; a trailing comment goes too
    StripRule(
        "starlight-imports",
        re.compile(
            rf"^{_HSPACE}*import{_HSPACE}+[^\n]*?{_HSPACE}+from{_HSPACE}*"
            rf"['\"]{re.escape(COMPONENTS_MODULE)}['\"]{_HSPACE}*;?{_HSPACE}*"
            rf"(?://[^\n]*)?(?:\n|$)",
            re.MULTILINE,
        ),
    ),
    tag_rule("steps", "Steps"),
    tag_rule("tabs", "Tabs"),
    tag_rule("tab-items", "TabItem"),
    # `// @noErrors`, `// @errors: 2322`, bare `// @`
    StripRule("twoslash-directives", re.compile(rf"//{_HSPACE}*@.*$", re.MULTILINE)),
)


def strip_markup(body: str, rules: Iterable[StripRule] = DEFAULT_RULES) -> str:
    """Apply every rule in *rules* to *body*."""
    for rule in rules:
        body = rule.apply(body)
    return body


def normalize_whitespace(text: str) -> str:
    """Collapse runs of blank lines to a single blank line and trim the ends.

    Single blank lines between paragraphs are left alone.  Running the
    function on its own output returns the same string.

    """
    return _BLANK_RUN.sub("\n\n", text).strip()
