import pytest
from bs4 import BeautifulSoup

from smart_trim.application.services.extension_composer import (
    ExtensionComposer,
    ends_with_period,
    splice_extension,
    split_trailing_tag,
)
from smart_trim.domain.value_objects import TargetLink, TrimConfig

LINK = TargetLink(path="/node/5")


@pytest.fixture
def composer(link_renderer):
    return ExtensionComposer(link_renderer=link_renderer)


def more_link(config=None):
    return (config or TrimConfig()).with_more_link()


class TestSpliceExtension:
    def test_inserts_before_final_closing_tag(self):
        assert splice_extension("<p>Hello</p>", "...") == "<p>Hello...</p>"

    def test_appends_without_closing_tag(self):
        assert splice_extension("Hello", "...") == "Hello..."

    def test_drops_one_space_before_closing_tag(self):
        assert splice_extension("<p>Hello </p>", "...") == "<p>Hello...</p>"

    def test_only_the_last_tag_is_used(self):
        assert (
            splice_extension("<div><p>Hi</p></div>", "...")
            == "<div><p>Hi</p>...</div>"
        )

    def test_keeps_trailing_newline(self):
        assert splice_extension("<p>Hi</p>\n", "...") == "<p>Hi...</p>\n"

    def test_multiline_text(self):
        text = "<p>One</p>\n<p>Two</p>"
        assert splice_extension(text, "!") == "<p>One</p>\n<p>Two!</p>"

    def test_text_ending_in_open_tag_is_appended(self):
        assert splice_extension("<p>Hello", "...") == "<p>Hello..."

    def test_empty_extension_leaves_text_unchanged(self):
        assert splice_extension("<p>Hello </p>", "") == "<p>Hello </p>"

    def test_backslashes_in_extension_are_literal(self):
        assert splice_extension("<p>x</p>", r"\1") == r"<p>x\1</p>"


def test_split_trailing_tag():
    assert split_trailing_tag("<p>Hello </p>\n") == ("<p>Hello", "</p>", "\n")
    assert split_trailing_tag("<div><p>Hi.</p></div>") == ("<div><p>Hi.</p>", "</div>", "")
    assert split_trailing_tag("Plain.") is None
    assert split_trailing_tag("<p>Open </p> tail") is None


def test_period_is_checked_in_front_of_final_tag_only():
    assert ends_with_period("Plain.") is True
    assert ends_with_period("<p>Hello world.</p>") is True
    assert ends_with_period("<div><p>Hello world.</p></div>") is False


def test_unclosed_tag_runs_are_appended_to():
    text = "</" * 20000
    assert splice_extension(text, "...") == text + "..."


class TestBuildExtension:
    def test_suffix_only_when_shortened(self, composer):
        config = TrimConfig()
        assert composer.build_extension("Text", True, config) == "..."
        assert composer.build_extension("Text", False, config) == ""

    def test_period_is_not_duplicated(self, composer):
        config = TrimConfig()
        assert composer.build_extension("Hello world.", True, config) == ".."
        assert composer.build_extension("<p>Hello world.</p>", True, config) == ".."

    def test_period_two_tags_deep_keeps_full_suffix(self, composer):
        text = "<div><p>Hello world.</p></div>"
        config = TrimConfig()
        assert composer.build_extension(text, True, config) == "..."
        assert composer.compose(text, True, config) == (
            "<div><p>Hello world.</p>...</div>"
        )

    def test_single_period_suffix_disappears(self, composer):
        config = TrimConfig(suffix=".")
        assert composer.build_extension("Done.", True, config) == ""

    def test_other_suffixes_are_kept(self, composer):
        config = TrimConfig(suffix=" (more)")
        assert composer.build_extension("Done.", True, config) == " (more)"

    def test_more_link_is_appended(self, composer):
        extension = composer.build_extension("Text", True, more_link(), LINK)
        assert extension.startswith("...")
        anchor = BeautifulSoup(extension, "html.parser").find("a")
        assert anchor["href"] == "/node/5"
        assert anchor["class"] == ["more-link"]
        assert anchor.get_text() == "Read more"

    def test_more_link_without_target_is_suppressed(self, composer):
        assert composer.build_extension("Text", True, more_link(), None) == "..."

    def test_more_link_suppressed_after_break_marker(self, composer):
        extension = composer.build_extension(
            "<p>Intro</p><!--break-->", False, more_link(), LINK
        )
        assert extension == ""

    def test_more_link_not_shown_when_disabled(self, composer):
        assert composer.build_extension("Text", False, TrimConfig(), LINK) == ""

    def test_custom_link_class(self, link_renderer):
        composer = ExtensionComposer(link_renderer, more_link_class="read-on")
        extension = composer.build_extension("Text", False, more_link(), LINK)
        assert BeautifulSoup(extension, "html.parser").a["class"] == ["read-on"]


def test_compose_splices_link_inside_paragraph(composer):
    markup = composer.compose("<p>Short</p>", False, more_link(), LINK)
    soup = BeautifulSoup(markup, "html.parser")
    assert markup.startswith("<p>Short<a ")
    assert markup.endswith("</a></p>")
    assert soup.p.a.get_text() == "Read more"
