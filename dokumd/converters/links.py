"""
Wiki link and image translation.

Links look like ``[[target]]`` or ``[[target|label]]`` and images like
``{{target}}`` or ``{{target|title}}``. Targets are either absolute URLs
or colon-separated namespace paths, which map onto directories.
"""

import re
from pathlib import Path
from typing import Optional
from urllib.parse import urlparse

from ..models import ConversionContext, ImageSpec, LinkSpec, Relocation


def translate_internal_link(target: str) -> str:
    """
    Convert a wiki link target into a Markdown href.

    Absolute URLs are returned unchanged. Namespace targets have a leading
    root-namespace colon removed and every remaining colon turned into a
    path separator.
    """
    if target.startswith(("http:", "https")):
        return target
    if target.startswith(":"):
        target = target[1:]
    return target.replace(":", "/")


def parse_link(match: str) -> LinkSpec:
    """Parse a full ``[[...]]`` match into a LinkSpec."""
    parts = match[2:-2].split("|", 1)
    if len(parts) == 1:
        return LinkSpec(target=parts[0])
    return LinkSpec(target=parts[0], label=parts[1])


class LinkTranslator:
    """Rewrites ``[[...]]`` links on a single line into Markdown links."""

    def handle_link(self, line: str, matches: list[str], context: ConversionContext) -> str:
        """
        Replace every matched wiki link in ``line``.

        Args:
            line: The line being converted.
            matches: Every ``[[...]]`` occurrence found on the line.
            context: Conversion state, used for notices.

        Returns:
            The line with each link replaced by ``[label](href)``.
        """
        for match in matches:
            link = parse_link(match)
            if "{{" in link.label:
                context.notice("Image inside link not translated, requires manual editing")
            replacement = f"[{link.label}]({translate_internal_link(link.target)})"
            line = line.replace(match, replacement)
        return line


def parse_image(body: str) -> ImageSpec:
    """Parse the inside of a ``{{...}}`` reference into an ImageSpec."""
    parts = body.split("|", 1)
    target = parts[0].strip()
    title = parts[1].strip() if len(parts) > 1 else ""
    if title.startswith(":"):
        title = title[1:]
    return ImageSpec(target=target, title=title)


class ImageTranslator:
    """
    Rewrites ``{{...}}`` image references and plans copies of the media files.

    Wiki media lives in one central store (``image_root``) arranged by
    namespace. Each converted document gets its own ``images/`` directory
    next to it, and references are rewritten to point there.
    """

    IMAGE_PATTERN = re.compile(r"\{\{\s*(.*?)\s*\}\}")
    IMAGES_DIRNAME = "images"

    def __init__(self, image_root: Optional[Path] = None, target_dir: Optional[Path] = None):
        """
        Args:
            image_root: Directory holding the wiki media store. When None,
                references are rewritten but no files are looked up or copied.
            target_dir: Directory of the converted document.
        """
        self.image_root = Path(image_root) if image_root else None
        self.target_dir = Path(target_dir) if target_dir else None

    def translate(self, content: str, context: ConversionContext) -> str:
        """Rewrite every image reference in ``content``."""

        def _replace(match: re.Match) -> str:
            line = content.count("\n", 0, match.start()) + 1
            return self._rewrite(parse_image(match.group(1)), context, line)

        return self.IMAGE_PATTERN.sub(_replace, content)

    def _rewrite(self, image: ImageSpec, context: ConversionContext, line: int) -> str:
        if urlparse(image.target).scheme in ("http", "https"):
            return f"![{image.title}]({image.target})"

        segments = image.target.removeprefix(":").split(":")
        segments[-1] = _strip_query(segments[-1])
        filename = segments[-1]

        title = "" if image.title == filename else image.title
        dest_dir = (self.target_dir or Path()) / self.IMAGES_DIRNAME

        if self.image_root is not None:
            source_path = self.image_root.joinpath(*segments)
            if source_path.is_file():
                context.relocations.append(Relocation(source_path, dest_dir / filename))
            else:
                context.notice(f"Original image not found: {source_path}", line=line)

        return f"![{title}]({self.IMAGES_DIRNAME}/{filename})"


def _strip_query(name: str) -> str:
    """Drop a DokuWiki size/query suffix such as ``?100``."""
    return re.sub(r"\?.*", "", name)
