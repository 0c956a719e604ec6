"""
Tests for the generic title/thumbnail selector chains and title cleaning.
"""

from video_assistant.document import Document
from video_assistant.models import UNKNOWN_TITLE
from video_assistant.strategies import clean_title, extract_field, first_match, match_selector, TITLE_SELECTORS


def doc(body: str, url: str = "https://example.com/watch/1") -> Document:
    return Document(url=url, html=body)


class TestTitleChain:
    """Tests for title selector priority."""

    def test_title_tag_wins_over_everything(self):
        document = doc(
            "<html><head><title>Page Title</title>"
            '<meta property="og:title" content="OG Title"></head>'
            "<body><h1>Heading</h1></body></html>"
        )
        assert extract_field(document, "title") == "Page Title"

    def test_heading_before_class_hooks(self):
        document = doc('<div class="video-title">Hook</div><h1>Heading</h1>')
        assert extract_field(document, "title") == "Heading"

    def test_data_title_before_video_title_class(self):
        document = doc('<div class="video-title">Hook</div><span data-title="x">Data Title</span>')
        assert extract_field(document, "title") == "Data Title"

    def test_class_hooks_before_metadata(self):
        document = doc('<meta name="title" content="Meta"><p class="title">Class Title</p>')
        assert extract_field(document, "title") == "Class Title"

    def test_og_title_before_meta_title(self):
        document = doc('<meta name="title" content="Meta"><meta property="og:title" content="OG">')
        assert extract_field(document, "title") == "OG"

    def test_whitespace_only_match_is_a_miss(self):
        document = doc("<h1>   \n  </h1><div class=\"video-title\">Real Title</div>")
        assert extract_field(document, "title") == "Real Title"

    def test_no_match_returns_empty(self):
        assert first_match(doc("<p>nothing here</p>"), TITLE_SELECTORS) == ""

    def test_match_selector_reports_winning_selector(self):
        document = doc('<meta property="og:title" content="Meta"><div class="title">  </div>')
        assert match_selector(document, TITLE_SELECTORS) == ("Meta", 'meta[property="og:title"]')
        assert match_selector(doc("<p>nothing</p>"), TITLE_SELECTORS) == ("", None)


class TestThumbnailChain:
    """Tests for thumbnail selector priority and node accessors."""

    def test_og_image_first(self):
        document = doc(
            '<meta name="twitter:image" content="https://cdn.example.com/tw.jpg">'
            '<meta property="og:image" content="https://cdn.example.com/og.jpg">'
        )
        assert extract_field(document, "thumbnail") == "https://cdn.example.com/og.jpg"

    def test_video_poster(self):
        document = doc('<video poster="/posters/1.jpg"></video>')
        assert extract_field(document, "thumbnail") == "https://example.com/posters/1.jpg"

    def test_video_without_poster_falls_through(self):
        document = doc('<video></video><div class="thumbnail"><img src="/t.png"></div>')
        assert extract_field(document, "thumbnail") == "https://example.com/t.png"

    def test_video_thumbnail_img(self):
        document = doc('<div class="video-thumbnail"><img src="https://img.example.com/a.jpg"></div>')
        assert extract_field(document, "thumbnail") == "https://img.example.com/a.jpg"

    def test_missing_thumbnail_is_empty(self):
        assert extract_field(doc("<h1>Title</h1>"), "thumbnail") == ""


class TestCleanTitle:
    """Tests for clean_title."""

    def test_empty_maps_to_sentinel(self):
        assert clean_title("") == UNKNOWN_TITLE
        assert clean_title(None) == UNKNOWN_TITLE
        assert clean_title("  -  ") == UNKNOWN_TITLE

    def test_collapses_whitespace(self):
        assert clean_title("  My \n\t  Video  ") == "My Video"

    def test_strips_dash_separators_at_ends(self):
        assert clean_title(" - My Video - ") == "My Video"

    def test_drops_site_suffix_when_asked(self):
        assert clean_title("  My Video - Site  ", strip_site_suffix=True) == "My Video"

    def test_inner_separator_kept_by_default(self):
        assert clean_title("Naruto Shippuden - Odcinek 12") == "Naruto Shippuden - Odcinek 12"

    def test_hyphenated_words_untouched(self):
        assert clean_title("Spider-Man trailer") == "Spider-Man trailer"

    def test_long_title_clamped_with_ellipsis(self):
        raw = "word " * 40
        cleaned_full = " ".join(raw.split())
        title = clean_title(raw)
        assert len(title) == 103
        assert title.endswith("...")
        assert title == cleaned_full[:100] + "..."

    def test_exactly_max_length_not_clamped(self):
        raw = "a" * 100
        assert clean_title(raw) == raw

    def test_custom_max_length(self):
        assert clean_title("abcdefghij", max_length=4) == "abcd..."
