"""
End-to-end trimming scenarios through the fully wired trimmer.
"""

from bs4 import BeautifulSoup

from smart_trim import ContentItem, FormatterSettings, TargetLink, TrimConfig


def test_word_trim_appends_suffix(trimmer):
    config = TrimConfig(trim_length=3, trim_unit="words", suffix="...")
    result = trimmer.trim(ContentItem(body="The quick brown fox jumps"), config)

    assert result.was_shortened is True
    assert result.markup == "The quick brown..."


def test_short_markup_is_left_alone(trimmer):
    config = TrimConfig(trim_length=50, trim_unit="words")
    result = trimmer.trim(ContentItem(body="<p>Short</p>"), config)

    assert result.was_shortened is False
    assert result.markup == "<p>Short</p>"


def test_suffix_period_is_merged_inside_paragraph(trimmer):
    item = ContentItem(
        body="<p>Hello world.</p><p>This second paragraph runs on.</p>",
        body_format="basic_html",
    )
    result = trimmer.trim(item, TrimConfig(trim_length=25, suffix="..."))

    assert result.was_shortened is True
    assert result.markup == "<p>Hello world...</p>"


def test_strip_html_produces_plain_text(trimmer):
    config = TrimConfig(strip_html=True)
    result = trimmer.trim(ContentItem(body="<b>Bold</b>&nbsp;text"), config)

    assert result.markup == "Bold text"


def test_break_marker_suppresses_more_link(trimmer):
    item = ContentItem(body="<p>Body</p>", summary="<p>Intro</p><!--break-->")
    config = TrimConfig(summary_mode="full").with_more_link()

    result = trimmer.trim(item, config, TargetLink(path="/node/5"))

    assert result.markup == "<p>Intro</p><!--break-->"


def test_more_link_is_placed_inside_last_element(trimmer):
    item = ContentItem(
        body="<p>First sentence here. Second sentence goes on and on.</p>",
        body_format="full_html",
    )
    config = TrimConfig(trim_length=30).with_more_link()

    result = trimmer.trim(item, config, TargetLink(path="/node/5"))

    soup = BeautifulSoup(result.markup, "html.parser")
    assert result.was_shortened is True
    assert result.markup.startswith("<p>First sentence here...<a ")
    assert soup.p.a["href"] == "/node/5"
    assert soup.p.a["class"] == ["more-link"]
    assert soup.p.a.get_text() == "Read more"


def test_host_settings_mapping(trimmer):
    config = FormatterSettings.model_validate(
        {
            "trim_length": "4",
            "trim_type": "words",
            "trim_suffix": " …",
            "more_link": 0,
            "summary_handler": "trim",
            "trim_options": {"text": "text"},
        }
    ).to_config()
    item = ContentItem(
        body="<p>Ignored body</p>",
        summary="<p>A <em>summary</em> with</p><p>several more words</p>",
    )

    result = trimmer.trim(item, config)

    assert result.used_summary is True
    assert result.markup == "A summary with several …"


def test_field_items_are_trimmed_independently(trimmer):
    config = TrimConfig(trim_length=10).with_more_link()
    items = [
        ContentItem(body="Tiny"),
        ContentItem(body="A much longer value. It keeps going."),
    ]

    results = trimmer.trim_items(items, config, TargetLink("/node/9"))

    assert [r.was_shortened for r in results] == [False, True]
    assert results[0].markup.startswith("Tiny<a ")
    assert results[1].markup.startswith("A much lon...<a ")


def test_suffix_after_nested_block_keeps_all_periods(trimmer):
    item = ContentItem(
        body="<div><p>Hello world.</p><p>More text here and more</p></div>",
        body_format="full_html",
    )
    result = trimmer.trim(item, TrimConfig(trim_length=30, suffix="..."))

    assert result.was_shortened is True
    assert result.markup == "<div><p>Hello world.</p>...</div>"
