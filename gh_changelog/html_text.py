"""Plain-text rendering of changelog HTML fragments.

Conversion is a fixed sequence of pattern rewrites, not a DOM transform, and
later rules depend on earlier ones: list items become bullets before their
``<ul>``/``<ol>`` wrappers are dropped, and anchors are unwrapped before the
catch-all tag rule removes whatever markup is left. Malformed or unbalanced
markup never raises; unmatched tags simply fall through to the ``tag`` rule.
"""

from __future__ import annotations

import re
from dataclasses import dataclass
from typing import Dict, Pattern, Tuple

BULLET = "\u2022"


@dataclass(frozen=True)
class RewriteRule:
    """A regex substitution applied to the whole fragment."""

    name: str
    pattern: Pattern[str]
    replacement: str = ""

    def apply(self, text: str) -> str:
        return self.pattern.sub(self.replacement, text)


def _rule(
    name: str, pattern: str, replacement: str = "", flags: int = re.IGNORECASE
) -> RewriteRule:
    return RewriteRule(name, re.compile(pattern, flags), replacement)


MARKUP_RULES: Tuple[RewriteRule, ...] = (
    _rule("doctype", r"<!DOCTYPE[^>]*>"),
    _rule("document-wrapper", r"</?(?:html|body)\b[^>]*>"),
    _rule("video", r"<video\b[^>]*>.*?</video\s*>", flags=re.IGNORECASE | re.DOTALL),
    _rule("image", r"<img\b[^>]*>"),
    _rule("post-footer", r"<p>The post.*?appeared first on.*?</p>", flags=0),
    _rule("heading", r"<h[1-6]\b[^>]*>(.*?)</h[1-6]\s*>", "\n\\1\n"),
    _rule("list-item", r"<li\b[^>]*>(.*?)</li\s*>", BULLET + " \\1\n"),
    _rule("list-wrapper", r"</?[uo]l\b[^>]*>"),
    _rule("paragraph-open", r"<p\b[^>]*>"),
    _rule("paragraph-close", r"</p\s*>", "\n\n"),
    _rule("line-break", r"<br\s*/?>", "\n"),
    _rule("anchor", r"<a\b[^>]*>([^<]*)</a\s*>", "\\1"),
    _rule("tag", r"<[^>]+>"),
)

WHITESPACE_RULES: Tuple[RewriteRule, ...] = (
    _rule("blank-lines", r"\n{3,}", "\n\n", flags=0),
    _rule("spaces", r" +", " ", flags=0),
)

ENTITIES: Dict[str, str] = {
    "&amp;": "&",
    "&lt;": "<",
    "&gt;": ">",
    "&quot;": '"',
    "&#39;": "'",
    "&apos;": "'",
    "&nbsp;": " ",
    "&ndash;": "-",
    "&mdash;": "\u2014",
    "&lsquo;": "'",
    "&rsquo;": "'",
    "&ldquo;": '"',
    "&rdquo;": '"',
    "&hellip;": "...",
    "&#8230;": "...",
    "&#8217;": "'",
    "&#8220;": '"',
    "&#8221;": '"',
}

# Single pass, so "&amp;lt;" decodes to "&lt;" and not to "<".
_ENTITY_PATTERN = re.compile("|".join(re.escape(entity) for entity in ENTITIES))


def decode_entities(text: str) -> str:
    """Replace the known named and numeric entities; leave others untouched."""
    return _ENTITY_PATTERN.sub(lambda match: ENTITIES[match.group(0)], text)


def strip_lines(text: str) -> str:
    """Strip every line, re-collapse blank runs and strip the whole text."""
    lines = "\n".join(line.strip() for line in text.split("\n"))
    return WHITESPACE_RULES[0].apply(lines).strip()


def html_to_text(html: str) -> str:
    """Reduce an HTML fragment to readable plain text."""
    text = html
    for rule in MARKUP_RULES:
        text = rule.apply(text)
    text = decode_entities(text)
    for rule in WHITESPACE_RULES:
        text = rule.apply(text)
    return strip_lines(text)
