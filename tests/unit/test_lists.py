"""
Unit tests for the list reconstructor.
"""

from dokumd.models import ListItemType


class TestUnorderedLists:
    """Tests for "  *" bullets."""

    def test_bullet_spacing(self, list_reconstructor, context):
        """Test that bullets come out as "*" plus two spaces."""
        assert list_reconstructor.convert("  * step one", context) == "*  step one"
        assert list_reconstructor.convert("  *tight", context) == "*  tight"
        assert list_reconstructor.convert("  *  wide", context) == "*  wide"
        assert context.list_item_type == ListItemType.UNORDERED


class TestOrderedLists:
    """Tests for "  -" items."""

    def test_ordinals_increase(self, list_reconstructor, context):
        """Test that consecutive items are numbered 1, 2, 3."""
        lines = ["  - one", "  - two", "  - three"]
        out = [list_reconstructor.convert(line, context) for line in lines]

        assert out == [" 1.  one", " 2.  two", " 3.  three"]
        assert context.list_item_type == ListItemType.ORDERED

    def test_counter_resets_after_break(self, list_reconstructor, context):
        """Test that an unindented line restarts numbering."""
        list_reconstructor.convert("  - one", context)
        list_reconstructor.convert("  - two", context)
        assert list_reconstructor.convert("break", context) == "break"
        assert context.list_item_type == ListItemType.NONE

        assert list_reconstructor.convert("  - again", context) == " 1.  again"

    def test_counter_resets_after_unordered_item(self, list_reconstructor, context):
        """Test that switching list kinds restarts numbering."""
        list_reconstructor.convert("  - one", context)
        list_reconstructor.convert("  * bullet", context)

        assert list_reconstructor.convert("  - one again", context) == " 1.  one again"

    def test_empty_line_keeps_list_state(self, list_reconstructor, context):
        """Test that a blank line does not end the list."""
        list_reconstructor.convert("  - one", context)
        assert list_reconstructor.convert("", context) == ""

        assert list_reconstructor.convert("  - two", context) == " 2.  two"


class TestOtherIndentation:
    """Tests for continuation and nested lines."""

    def test_continuation_is_indented_to_four(self, list_reconstructor, context):
        """Test that two-space continuation text gets four spaces."""
        assert list_reconstructor.convert("  more text", context) == "    more text"

    def test_nested_list_emits_notice(self, list_reconstructor, context):
        """Test that nested items are reported and left alone."""
        line = list_reconstructor.convert("    * nested", context)

        assert line == "    * nested"
        assert context.notices[0].message == "Possible nested indent, which isn't handled"

    def test_deep_indented_text_is_untouched(self, list_reconstructor, context):
        """Test that deeply indented non-list text is left alone."""
        assert list_reconstructor.convert("    code-ish", context) == "    code-ish"
        assert context.notices == []
