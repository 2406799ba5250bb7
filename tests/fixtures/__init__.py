# Test fixtures
from .sample_pages import (
    SAMPLE_WIKI_PAGE,
    SAMPLE_SETUP_PAGE,
    SAMPLE_IMAGE_PAGE,
    SAMPLE_MARKDOWN_PAGE,
    SAMPLE_PURE_WIKI_PAGE,
    TINY_IMAGE,
    create_media_store,
    create_wiki_tree,
)

__all__ = [
    "SAMPLE_WIKI_PAGE",
    "SAMPLE_SETUP_PAGE",
    "SAMPLE_IMAGE_PAGE",
    "SAMPLE_MARKDOWN_PAGE",
    "SAMPLE_PURE_WIKI_PAGE",
    "TINY_IMAGE",
    "create_media_store",
    "create_wiki_tree",
]
