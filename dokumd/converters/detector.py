"""
Heuristic check for documents that are already Markdown.
"""

import re
from pathlib import Path

from ..loader import load_text, split_lines


class MarkdownDetector:
    """
    Detects fragments of Markdown in a document.

    Used to skip files that were already converted. The checks are
    deliberately loose: a false positive only means a file is copied
    instead of converted.
    """

    ATX_HEADING_PATTERN = re.compile(r"^#+\s+")
    SETEXT_UNDERLINE_PATTERN = re.compile(r"^[=-]+$")

    def contains_markdown(self, text: str) -> bool:
        """Return True if any line looks like Markdown."""
        for line in split_lines(text):
            if self.has_code_block(line):
                return True
            if self.has_inline_heading(line):
                return True
            if self.has_multiline_heading(line):
                return True
        return False

    def file_contains_markdown(self, file_path: Path | str) -> bool:
        """
        Return True if the given file contains Markdown.

        Raises:
            FileLoadError: If the file cannot be read.
        """
        return self.contains_markdown(load_text(file_path))

    @staticmethod
    def has_code_block(line: str) -> bool:
        return "```" in line

    def has_inline_heading(self, line: str) -> bool:
        return self.ATX_HEADING_PATTERN.match(line) is not None

    def has_multiline_heading(self, line: str) -> bool:
        return self.SETEXT_UNDERLINE_PATTERN.match(line) is not None
