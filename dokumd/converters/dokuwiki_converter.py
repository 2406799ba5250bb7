"""
DokuWiki-to-Markdown Extra Converter

Converts DokuWiki pages line by line. Each line is handled according to
the block it sits in (plain text, a <code> block or a table), and the
result is passed through a whole-document cleanup pass.
"""

import os
import re
from pathlib import Path
from typing import Optional

from ..loader import load_text, split_lines
from ..models import ConversionContext, ConversionResult, LineMode
from .cleanup import API_HOST, MarkdownCleanup
from .links import ImageTranslator
from .lists import ListReconstructor
from .rules import InlineRewriter
from .tables import TABLE_DELIMITERS, render_table, split_table_row


class DokuwikiConverter:
    """Converts DokuWiki text to Markdown Extra."""

    SUPPORTED_EXTENSIONS = {".txt", ".md"}

    CODE_OPEN_PATTERN = re.compile(r"^<code(?:\s([a-zA-Z0-9]*))?>$")
    CODE_CLOSE = "</code>"
    FENCE = "~~~"
    TAB = "    "

    def __init__(self, image_root: Optional[Path] = None, api_host: str = API_HOST):
        """
        Args:
            image_root: Directory of the wiki media store, used to find
                images that need copying next to converted documents.
            api_host: Host of the API documentation whose links are shortened.
        """
        self.image_root = Path(image_root) if image_root else None
        self.api_host = api_host
        self.rewriter = InlineRewriter()

    @staticmethod
    def can_handle(file_path: str) -> bool:
        _, ext = os.path.splitext(str(file_path).lower())
        return ext in DokuwikiConverter.SUPPORTED_EXTENSIONS

    def convert(
        self,
        contents: str,
        source: str = "unknown",
        target_dir: Optional[Path] = None,
    ) -> ConversionResult:
        """
        Convert a DokuWiki document.

        Args:
            contents: The raw document text.
            source: Name of the document, used in notices.
            target_dir: Directory the converted document will be written to.
                Images are planned to be copied into its ``images/`` folder.

        Returns:
            The Markdown text with the notices and image relocations
            collected along the way.
        """
        context = ConversionContext(source=source)
        lists = ListReconstructor()
        output = []

        for line in split_lines(contents):
            context.line_number += 1
            trimmed = line.strip()
            previous_mode = context.mode

            opening = self.CODE_OPEN_PATTERN.match(trimmed) if context.mode != LineMode.CODE else None
            if opening:
                line = self.FENCE
                if opening.group(1):
                    line += " {" + opening.group(1) + "}"
                context.mode = LineMode.CODE
            elif context.mode == LineMode.CODE and trimmed == self.CODE_CLOSE:
                line = self.FENCE
                context.mode = LineMode.TEXT
            elif context.mode == LineMode.TEXT and trimmed and trimmed[0] in TABLE_DELIMITERS:
                # rows are buffered so column widths can be computed on exit
                context.mode = LineMode.TABLE
                context.table = []
            elif context.mode == LineMode.TABLE and (not trimmed or trimmed[0] not in TABLE_DELIMITERS):
                context.mode = LineMode.TEXT

            if previous_mode == LineMode.TABLE and context.mode != LineMode.TABLE:
                output.append(render_table(context.table))
                context.table = []

            if context.mode == LineMode.TEXT:
                line = line.replace("\t", self.TAB)
                line = self.rewriter.apply(line, context)
                line = lists.convert(line, context)
            elif context.mode == LineMode.TABLE:
                line = self.rewriter.apply(line.replace("\t", self.TAB), context)
                context.table.append(split_table_row(line, trimmed[0]))
                continue

            output.append(line + "\n")

        if context.mode == LineMode.TABLE:
            output.append(render_table(context.table))

        cleanup = MarkdownCleanup(
            ImageTranslator(self.image_root, target_dir),
            api_host=self.api_host,
        )
        text = cleanup.process("".join(output), context)
        return ConversionResult.from_context(text, context)

    def convert_file(self, input_path: Path | str, target_dir: Optional[Path] = None) -> ConversionResult:
        """
        Load and convert a DokuWiki file.

        Raises:
            FileLoadError: If the file cannot be read.
        """
        contents = load_text(input_path)
        return self.convert(contents, source=str(input_path), target_dir=target_dir)
