"""
Indentation-based list conversion.

DokuWiki list items are indented by two spaces and start with ``*``
(unordered) or ``-`` (ordered). Nested lists are reported, not converted.
"""

from ..models import ConversionContext, ListItemType


class ListReconstructor:
    """Converts one already tab-expanded line of list markup."""

    UNORDERED_PREFIX = "  *"
    ORDERED_PREFIX = "  -"
    NESTED_PREFIX = "   "
    CONTINUATION_PREFIX = "  "

    def convert(self, line: str, context: ConversionContext) -> str:
        if line == "":
            return line

        if not line.startswith(self.CONTINUATION_PREFIX) and line[0] != "\t" and line.strip() != "":
            # unindented text ends the list
            context.list_item_type = ListItemType.NONE
            return line

        if line.startswith(self.UNORDERED_PREFIX):
            context.list_item_type = ListItemType.UNORDERED
            return self._bullet(line[2:])

        if line.startswith(self.ORDERED_PREFIX):
            if context.list_item_type != ListItemType.ORDERED:
                context.list_item_count = 1
            context.list_item_type = ListItemType.ORDERED
            line = f" {context.list_item_count}. {line[3:]}"
            context.list_item_count += 1
            return line

        if line.startswith(self.NESTED_PREFIX):
            stripped = line.strip()
            if stripped and stripped[0] in "*-":
                context.notice("Possible nested indent, which isn't handled")
            return line

        if line.startswith(self.CONTINUATION_PREFIX):
            # Markdown Extra wants 4 spaces for extra paragraphs in an item
            return "  " + line

        return line

    @staticmethod
    def _bullet(item: str) -> str:
        """Space a ``*`` bullet as ``*`` plus two spaces so items line up."""
        return "*  " + item[1:].lstrip(" ")
