"""
Pytest configuration and shared fixtures.
"""

import sys
from pathlib import Path
import pytest

# Add the project root to path for imports
sys.path.insert(0, str(Path(__file__).parent.parent))

from dokumd.converters.cleanup import MarkdownCleanup
from dokumd.converters.detector import MarkdownDetector
from dokumd.converters.dokuwiki_converter import DokuwikiConverter
from dokumd.converters.rules import InlineRewriter
from dokumd.converters.lists import ListReconstructor
from dokumd.models import ConversionContext
from fixtures import (
    SAMPLE_WIKI_PAGE,
    SAMPLE_SETUP_PAGE,
    SAMPLE_MARKDOWN_PAGE,
    create_media_store,
    create_wiki_tree,
)


# ============================================================================
# Pytest Hooks
# ============================================================================


def pytest_configure(config):
    """Configure custom markers."""
    config.addinivalue_line("markers", "integration: mark as integration test")


# ============================================================================
# Component Fixtures
# ============================================================================


@pytest.fixture
def context():
    """Create a fresh conversion context."""
    return ConversionContext(source="pages/start.txt")


@pytest.fixture
def converter():
    """Create a converter without a media store."""
    return DokuwikiConverter()


@pytest.fixture
def rewriter():
    """Create an inline rewriter with the default rule table."""
    return InlineRewriter()


@pytest.fixture
def list_reconstructor():
    """Create a list reconstructor."""
    return ListReconstructor()


@pytest.fixture
def cleanup():
    """Create a cleanup normalizer without a media store."""
    return MarkdownCleanup()


@pytest.fixture
def detector():
    """Create a Markdown detector."""
    return MarkdownDetector()


# ============================================================================
# Content Fixtures
# ============================================================================


@pytest.fixture
def wiki_page():
    """A DokuWiki page using most supported syntax."""
    return SAMPLE_WIKI_PAGE


@pytest.fixture
def setup_page():
    """A heading followed by an unordered list."""
    return SAMPLE_SETUP_PAGE


@pytest.fixture
def markdown_page():
    """A page that is already Markdown."""
    return SAMPLE_MARKDOWN_PAGE


# ============================================================================
# Temporary File Fixtures
# ============================================================================


@pytest.fixture
def media_root(tmp_path):
    """Create a DokuWiki media store."""
    return create_media_store(tmp_path / "media")


@pytest.fixture
def wiki_tree(tmp_path):
    """Create a directory tree of wiki pages and other files."""
    return create_wiki_tree(tmp_path / "pages")


@pytest.fixture
def wiki_file(tmp_path, wiki_page):
    """Create a single DokuWiki page on disk."""
    file_path = tmp_path / "forms.txt"
    file_path.write_text(wiki_page, encoding="utf-8")
    return file_path
