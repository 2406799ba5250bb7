from .dokuwiki_converter import DokuwikiConverter
from .cleanup import MarkdownCleanup
from .detector import MarkdownDetector
from .web_source import WikiPageSource, WikiFetchError

__all__ = [
    "DokuwikiConverter",
    "MarkdownCleanup",
    "MarkdownDetector",
    "WikiPageSource",
    "WikiFetchError",
]
