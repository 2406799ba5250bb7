"""
Unit tests for link and image translation.
"""

from pathlib import Path

import pytest

from dokumd.converters.links import (
    ImageTranslator,
    LinkTranslator,
    parse_image,
    parse_link,
    translate_internal_link,
)
from dokumd.models import ImageSpec, LinkSpec, Relocation


class TestTranslateInternalLink:
    """Tests for translate_internal_link."""

    @pytest.mark.parametrize("target", [
        "http://doc.silverstripe.org/doku.php?id=contributing",
        "https://example.com/a:b",
        "https://example.com",
    ])
    def test_absolute_urls_pass_through(self, target):
        """Test that http: and https targets are never rewritten."""
        assert translate_internal_link(target) == target

    def test_namespaces_become_paths(self):
        """Test colon to slash translation."""
        assert translate_internal_link("GSoc:2007:i18n") == "GSoc/2007/i18n"

    def test_root_namespace_colon_is_stripped(self):
        """Test that a leading root-namespace colon is removed."""
        assert translate_internal_link(":themes:developing") == "themes/developing"

    def test_fragment_only(self):
        """Test a bare fragment link."""
        assert translate_internal_link("#ComponentSet") == "#ComponentSet"


class TestParseLink:
    """Tests for parse_link and LinkSpec."""

    def test_label_defaults_to_target(self):
        """Test that a link without a label uses its target."""
        link = parse_link("[[recipes:forms]]")

        assert link == LinkSpec(target="recipes:forms", label="recipes:forms")

    def test_label(self):
        """Test a link with a label."""
        link = parse_link("[[recipes:forms|our form recipes]]")

        assert link.target == "recipes:forms"
        assert link.label == "our form recipes"

    def test_splits_on_first_pipe_only(self):
        """Test that later pipes stay in the label."""
        assert parse_link("[[a|b|c]]").label == "b|c"


class TestLinkTranslator:
    """Tests for LinkTranslator.handle_link."""

    def test_replaces_every_match(self, context):
        """Test that each match is replaced in place."""
        translator = LinkTranslator()
        line = translator.handle_link(
            "[[directory-structure#module_structure|guidelines]] or [[#documentation]]",
            ["[[directory-structure#module_structure|guidelines]]", "[[#documentation]]"],
            context,
        )

        assert line == "[guidelines](directory-structure#module_structure) or [#documentation](#documentation)"
        assert context.notices == []

    def test_image_in_label_emits_notice(self, context):
        """Test that an image used as a label is reported."""
        translator = LinkTranslator()
        translator.handle_link("[[x|{{a.png}}]]", ["[[x|{{a.png}}]]"], context)

        assert context.notices[0].message == "Image inside link not translated, requires manual editing"


class TestParseImage:
    """Tests for parse_image."""

    def test_target_only(self):
        """Test an image without a title."""
        assert parse_image("tutorial:file.png") == ImageSpec(target="tutorial:file.png", title="")

    def test_title_root_colon_is_stripped(self):
        """Test that a title starting with the root colon loses it."""
        assert parse_image(":file.png|:file.png").title == "file.png"


class TestImageTranslator:
    """Tests for ImageTranslator."""

    def test_existing_image_is_relocated(self, context, media_root, tmp_path):
        """Test that a found image produces a relocation directive."""
        translator = ImageTranslator(image_root=media_root, target_dir=tmp_path / "out")
        text = translator.translate("{{tutorial:home-first.png|My Title}}", context)

        assert text == "![My Title](images/home-first.png)"
        assert context.relocations == [
            Relocation(
                media_root / "tutorial" / "home-first.png",
                tmp_path / "out" / "images" / "home-first.png",
            )
        ]
        assert context.notices == []

    def test_query_string_is_dropped(self, context, media_root, tmp_path):
        """Test that a size suffix does not end up in the file name."""
        translator = ImageTranslator(image_root=media_root, target_dir=tmp_path)
        text = translator.translate("{{ tutorial:home-first.png?100 }}", context)

        assert text == "![](images/home-first.png)"
        assert context.relocations[0].source_path == media_root / "tutorial" / "home-first.png"

    def test_title_equal_to_filename_is_cleared(self, context):
        """Test that a redundant caption is removed."""
        text = ImageTranslator().translate("{{:file.png|:file.png}}", context)

        assert text == "![](images/file.png)"

    def test_missing_image_emits_notice(self, context, media_root):
        """Test that a missing image is reported and still rewritten."""
        content = "Intro\n\n{{:missing.png|Missing}}"
        text = ImageTranslator(image_root=media_root).translate(content, context)

        assert text == "Intro\n\n![Missing](images/missing.png)"
        assert context.relocations == []
        assert len(context.notices) == 1
        assert context.notices[0].line == 3
        assert context.notices[0].message.startswith("Original image not found:")

    def test_absolute_url_is_kept(self, context, media_root):
        """Test that remote images are not copied."""
        text = ImageTranslator(image_root=media_root).translate(
            "{{http://example.com/logo.png|Logo}}", context
        )

        assert text == "![Logo](http://example.com/logo.png)"
        assert context.relocations == []
        assert context.notices == []

    def test_without_media_store_nothing_is_copied(self, context):
        """Test that no lookups happen without an image root."""
        text = ImageTranslator().translate("{{tutorial:home.png}}", context)

        assert text == "![](images/home.png)"
        assert context.relocations == []
        assert context.notices == []

    def test_default_destination_is_relative(self, context, media_root):
        """Test the destination when no target directory is given."""
        ImageTranslator(image_root=media_root).translate("{{tutorial:home-first.png}}", context)

        assert context.relocations[0].dest_path == Path("images") / "home-first.png"
