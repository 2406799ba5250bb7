"""
Dokumd - DokuWiki to Markdown Extra Converter

Converts DokuWiki pages (files, whole directory trees, or pages fetched
from a running wiki) into Markdown Extra. Headings, links, images,
lists, tables and code blocks are translated; anything that cannot be
translated safely is reported as a notice instead of guessed at.
"""

__version__ = "1.0.0"
