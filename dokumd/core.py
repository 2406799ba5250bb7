"""
Dokumd Core Engine

The orchestrator that takes files, directories and wiki page URLs,
skips anything that is already Markdown, converts the rest and writes
the results (plus any referenced images) into the output directory.
"""

import os
import re
import shutil
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

from .converters.cleanup import API_HOST
from .converters.detector import MarkdownDetector
from .converters.dokuwiki_converter import DokuwikiConverter
from .converters.web_source import WikiPageSource
from .loader import FileLoadError, load_text
from .models import Relocation


@dataclass
class BatchSummary:
    """Counts from converting a directory tree."""
    source_dir: Path
    converted: int = 0
    copied: int = 0
    errors: int = 0

    @property
    def total(self) -> int:
        return self.converted + self.copied

    def __str__(self) -> str:
        return (
            f"Completed. Converted: {self.converted} Copied: {self.copied} "
            f"Errors: {self.errors} Total: {self.total}"
        )


class Dokumd:
    """
    Main conversion engine.

    Accepts a file path, a directory or a DokuWiki page URL and produces
    Markdown Extra output.
    """

    DEFAULT_OUTPUT_DIRNAME = "dokumd_output"

    def __init__(
        self,
        output_dir: Optional[str] = None,
        image_root: Optional[str] = None,
        header: Optional[str] = None,
        api_host: str = API_HOST,
        quiet: bool = False,
    ):
        """
        Args:
            output_dir: Where converted documents are written.
            image_root: Directory of the wiki media store. Without it,
                image references are rewritten but no files are copied.
            header: Text written at the top of every converted document.
            api_host: Host of the API documentation whose links are shortened.
            quiet: Suppress progress output.
        """
        self.output_dir = Path(output_dir) if output_dir else Path.cwd() / self.DEFAULT_OUTPUT_DIRNAME
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.header = header or ""
        self.quiet = quiet
        self.converter = DokuwikiConverter(image_root=image_root, api_host=api_host)
        self.detector = MarkdownDetector()

    def convert(self, source: str, save: bool = True) -> str:
        """
        Convert a source to Markdown.

        Args:
            source: File path, directory path, or wiki page URL
            save: If True, write the output into the output directory

        Returns:
            The Markdown text, or the summary line for a directory
        """
        source = source.strip()

        if WikiPageSource.can_handle(source):
            return self.convert_url(source, save=save)

        elif os.path.isdir(source):
            return str(self.convert_directory(source, save=save))

        elif os.path.isfile(source):
            return self.convert_file(source, save=save)

        else:
            raise ValueError(
                f"Cannot handle source: {source}\n"
                f"Provide a valid file path, directory, or URL."
            )

    def convert_url(self, url: str, save: bool = True) -> str:
        """
        Fetch a wiki page and convert it.

        Raises:
            WikiFetchError: If the page cannot be fetched.
        """
        self._log(f"[URL] Converting: {url}")
        contents = WikiPageSource.fetch(url)
        out_path = self.output_dir / WikiPageSource.page_name(url)

        if self.detector.contains_markdown(contents):
            self._log(f"[MARKDOWN] {url} (Markdown detected, not converted)")
            if save:
                self._write(out_path, contents)
            return contents

        return self._convert_contents(contents, url, out_path, save)

    def convert_file(self, file_path: str, save: bool = True, output_path: Optional[Path] = None) -> str:
        """
        Convert a single file.

        Args:
            file_path: The DokuWiki file.
            save: If True, write the result.
            output_path: Where to write it. Defaults to the output directory,
                with a ``.txt`` extension renamed to ``.md``.

        Returns:
            The Markdown text (the file unchanged if it is already Markdown).

        Raises:
            FileLoadError: If the file cannot be read.
        """
        text, _ = self._process_file(Path(file_path), output_path, save)
        return text

    def convert_directory(self, dir_path: str, save: bool = True) -> BatchSummary:
        """
        Convert every file below a directory, mirroring its layout.

        Files that are not ``.txt``/``.md`` are copied as they are. Failures
        are reported and counted; the remaining files are still processed.
        """
        self._log(f"[DIR] Converting all files in: {dir_path}")
        root = Path(dir_path)
        summary = BatchSummary(source_dir=root)
        output_root = self.output_dir.resolve()

        for path in sorted(root.rglob("*")):
            if not path.is_file():
                continue
            if output_root in path.resolve().parents:
                continue

            out_path = self.output_dir / path.relative_to(root).parent / _output_name(path.name)

            try:
                if not self.converter.can_handle(path):
                    self._log(f"[COPY] {path}")
                    if save:
                        self._copy(path, out_path)
                    summary.copied += 1
                    continue

                _, converted = self._process_file(path, out_path, save)
                if converted:
                    summary.converted += 1
                else:
                    summary.copied += 1
            except (FileLoadError, OSError) as e:
                print(f"[ERROR] Failed to convert {path}: {e}", file=sys.stderr)
                summary.errors += 1

        self._log(str(summary))
        return summary

    def relocate_images(self, relocations: list[Relocation]) -> None:
        """Copy referenced images next to the converted documents."""
        for relocation in relocations:
            relocation.dest_path.parent.mkdir(parents=True, exist_ok=True)
            shutil.copyfile(relocation.source_path, relocation.dest_path)
            self._log(f"[IMAGE] {relocation.source_path} -> {relocation.dest_path}")

    def _process_file(self, path: Path, output_path: Optional[Path], save: bool) -> tuple[str, bool]:
        """Convert or copy one file. Returns the text and whether it was converted."""
        out_path = Path(output_path) if output_path else self.output_dir / _output_name(path.name)
        contents = load_text(path)

        if self.detector.contains_markdown(contents):
            self._log(f"[MARKDOWN] {path} (Markdown detected, copying)")
            if save:
                self._copy(path, out_path)
            return contents, False

        return self._convert_contents(contents, str(path), out_path, save), True

    def _convert_contents(self, contents: str, source: str, out_path: Path, save: bool) -> str:
        self._log(f"[CONVERT] {source}")
        result = self.converter.convert(contents, source=source, target_dir=out_path.parent)

        for notice in result.notices:
            self._log(f"[NOTICE] {notice}")

        if save:
            self._write(out_path, self.header + result.text)
            self.relocate_images(result.relocations)

        return result.text

    def _write(self, out_path: Path, text: str) -> None:
        out_path.parent.mkdir(parents=True, exist_ok=True)
        with open(out_path, "w", encoding="utf-8") as f:
            f.write(text)
        self._log(f"[SAVED] {out_path}")

    def _copy(self, src: Path, dest: Path) -> None:
        dest.parent.mkdir(parents=True, exist_ok=True)
        shutil.copyfile(src, dest)

    def _log(self, message: str) -> None:
        if not self.quiet:
            print(message)


def _output_name(filename: str) -> str:
    """Rename a ``.txt`` page to ``.md``; other names are kept."""
    return re.sub(r"\.txt$", ".md", filename)
