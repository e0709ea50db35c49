"""
Tests for SEO meta derivation.
"""

import pytest

from athenaeum.shared.utils.seo import SEOMetaDeriver, truncate_at_word


class TestTruncateAtWord:
    """truncate_at_word"""

    def test_short_text_is_untouched(self):
        assert truncate_at_word("critique", 60) == "critique"

    def test_cuts_at_last_space_inside_bound(self):
        assert truncate_at_word("critique of pure reason", 12) == "critique of"

    def test_word_ending_exactly_at_bound_is_kept(self):
        assert truncate_at_word("abc def ghi", 7) == "abc def"

    def test_single_long_word_is_hard_cut(self):
        assert truncate_at_word("a" * 200, 160) == "a" * 160

    def test_no_ellipsis(self):
        assert not truncate_at_word("one two three four", 9).endswith("...")


class TestSEOMetaDeriver:
    """SEOMetaDeriver"""

    def test_title_within_bound_is_unchanged(self):
        assert SEOMetaDeriver().derive_title("Immanuel Kant") == "Immanuel Kant"

    def test_title_is_cut_to_sixty_characters(self):
        title = "The Metaphysical Foundations of Natural Science and Its Later Reception"

        derived = SEOMetaDeriver().derive_title(title)

        assert len(derived) <= 60
        assert title.startswith(derived)
        assert title[len(derived)] == " "

    def test_description_strips_html(self):
        body = "<p>The <b>critique</b> of <a href='/x'>reason</a></p>"
        assert SEOMetaDeriver().derive_description(body) == "The critique of reason"

    def test_description_strips_markdown(self):
        body = "# Heading\n\n**Bold** text and [a link](https://example.com)\n- item"
        assert SEOMetaDeriver().derive_description(body) == "Heading Bold text and a link item"

    def test_description_unescapes_entities(self):
        assert SEOMetaDeriver().derive_description("Kant &amp; Hegel") == "Kant & Hegel"

    @pytest.mark.parametrize("length", [161, 300, 1200])
    def test_description_cut_at_word_boundary(self, length):
        words = ("dialectic " * 200)[:length].strip()

        derived = SEOMetaDeriver().derive_description(words)

        assert len(derived) <= 160
        assert words.startswith(derived)
        assert words[len(derived)] == " "

    def test_empty_body_gives_empty_description(self):
        assert SEOMetaDeriver().derive_description(None) == ""
        assert SEOMetaDeriver().derive_description("") == ""

    def test_custom_bounds(self):
        seo = SEOMetaDeriver(title_max_length=10, description_max_length=20)
        assert seo.derive_title("Being and Time") == "Being and"
        assert len(seo.derive_description("word " * 50)) <= 20
