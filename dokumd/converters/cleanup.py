"""
Second-pass cleanup of converted Markdown.

Fixes formatting the line-by-line converter cannot see on its own:
spacing around headings, lists and code blocks, stray inline HTML,
unbalanced headings, API links, emphasis and image references.
"""

import re
from typing import Optional

from ..loader import split_lines
from ..models import ConversionContext
from .links import ImageTranslator
from .rules import HEADING_LEVELS


API_HOST = "api.silverstripe.org"

INLINE_HTML_PATTERN = re.compile(r"[*'`]*(<[^>]*?>)[*'`]*")
FENCE_PATTERN = re.compile(r"^~~~(\s\{(.*)\})?")
BULLET_PATTERN = re.compile(r"^\s*\*")
EMPHASIS_PATTERN = re.compile(r"\s//(\S[^\]]*?)//")
LEADING_EMPHASIS_PATTERN = re.compile(r"^//(\S[^\]]*?)//")

UNBALANCED_HEADING_RULES = tuple(
    (re.compile(rf"^{'=' * equals}([^=]*) [=\s]*"), "#" * hashes + r" \1")
    for equals, hashes in HEADING_LEVELS.items()
)


class MarkdownCleanup:
    """Whole-document normalizer run on the converter's output."""

    def __init__(self, image_translator: Optional[ImageTranslator] = None, api_host: str = API_HOST):
        """
        Args:
            image_translator: Rewrites image references and plans file copies.
                Defaults to one without a media store.
            api_host: Host of the API documentation whose links are shortened.
        """
        self.image_translator = image_translator or ImageTranslator()
        self.api_link_pattern = re.compile(
            rf"\[(\w+)\]\(https?://{re.escape(api_host)}[^)\s]*\)"
        )

    def process(self, content: str, context: Optional[ConversionContext] = None) -> str:
        """
        Run every cleanup step in order.

        Args:
            content: Converted Markdown text.
            context: Collects notices and image relocations. A throwaway
                context is used when omitted.

        Returns:
            The cleaned Markdown text.
        """
        context = context or ConversionContext()

        lines = split_lines(content)
        lines = self.convert_inline_html(lines)
        lines = self.convert_unbalanced_headings(lines)
        lines = self.convert_code_blocks(lines)
        lines = self.newlines_after_headings(lines)
        lines = self.newlines_before_lists(lines)
        lines = self.convert_api_links(lines)
        lines = self.convert_emphasis(lines)

        return self.image_translator.translate("\n".join(lines), context)

    def convert_inline_html(self, lines: list[str]) -> list[str]:
        """Wrap bare HTML tags in backticks, outside tab-indented code."""
        return [
            line if line.startswith("\t") else INLINE_HTML_PATTERN.sub(r"`\1`", line)
            for line in lines
        ]

    def convert_unbalanced_headings(self, lines: list[str]) -> list[str]:
        """Convert headings whose leading and trailing ``=`` runs differ."""
        out = []
        for line in lines:
            for pattern, template in UNBALANCED_HEADING_RULES:
                line = pattern.sub(template, line)
            out.append(line)
        return out

    def convert_code_blocks(self, lines: list[str]) -> list[str]:
        """Turn ``~~~`` fences into backtick fences, keeping the language."""
        out = []
        in_code = False
        for line in lines:
            match = FENCE_PATTERN.match(line)
            if match:
                if not in_code:
                    in_code = True
                    if out and out[-1] != "":
                        out.append("")
                    line = "```" + (match.group(2) or "")
                else:
                    in_code = False
                    line = "```"
            out.append(line)
        return out

    def newlines_after_headings(self, lines: list[str]) -> list[str]:
        out = []
        for i, line in enumerate(lines):
            out.append(line)
            if line.startswith("#") and i + 1 < len(lines) and lines[i + 1] != "":
                out.append("")
        return out

    def newlines_before_lists(self, lines: list[str]) -> list[str]:
        out = []
        for i, line in enumerate(lines):
            if (
                BULLET_PATTERN.match(line)
                and i > 0
                and lines[i - 1] != ""
                and not BULLET_PATTERN.match(lines[i - 1])
            ):
                out.append("")
            out.append(line)
        return out

    def convert_api_links(self, lines: list[str]) -> list[str]:
        """Shorten ``[ClassName](http://<api host>/...)`` to ``[api:ClassName]``."""
        return [self.api_link_pattern.sub(r"`[api:\1]`", line) for line in lines]

    def convert_emphasis(self, lines: list[str]) -> list[str]:
        """
        Turn ``//text//`` into ``*text*``.

        The opening marker must follow whitespace or start the line, so
        ``http://`` and similar are left alone.
        """
        out = []
        for line in lines:
            line = EMPHASIS_PATTERN.sub(r" *\1*", line)
            line = LEADING_EMPHASIS_PATTERN.sub(r"*\1*", line)
            out.append(line)
        return out
