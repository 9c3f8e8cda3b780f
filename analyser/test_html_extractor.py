import pytest

from analyser.errors import ParseError
from analyser.html_extractor import extract_text


def test_extract_text_from_html_is_success(sample_html):
    assert extract_text(sample_html, "div#example p") == "Hello, world!"


def test_extract_text_from_html_is_failure(sample_html):
    with pytest.raises(ParseError) as exc:
        extract_text(sample_html, "div#example a")
    assert "no text available at selector" in str(exc.value)
    assert str(exc.value) == "Error parsing HTML. no text available at selector"


def test_concatenates_descendant_text_in_document_order():
    html = "<div class='post'><p>Good <b>very</b> good</p><span>!</span></div>"
    assert extract_text(html, "div.post") == "Good very good!"


def test_first_match_only():
    html = "<ul><li>first</li><li>second</li></ul>"
    assert extract_text(html, "li") == "first"


def test_whitespace_between_elements_is_kept():
    html = "<div id='x'>\n  <p>a</p>\n</div>"
    assert extract_text(html, "#x") == "\n  a\n"


def test_comments_are_not_text():
    html = "<p id='x'><!-- hidden -->shown</p>"
    assert extract_text(html, "#x") == "shown"


def test_empty_element_is_an_error():
    with pytest.raises(ParseError, match="no text available at selector"):
        extract_text("<div><p id='empty'></p></div>", "#empty")


@pytest.mark.parametrize("selector", ["div[", ">>> p", ""])
def test_invalid_selector(sample_html, selector):
    with pytest.raises(ParseError) as exc:
        extract_text(sample_html, selector)
    assert exc.value.detail.startswith("unable to parse selector: ")


def test_invalid_selector_on_empty_document():
    with pytest.raises(ParseError, match="unable to parse selector"):
        extract_text("", "div[")


def test_whitespace_only_text_is_returned_exactly():
    assert extract_text("<p id='x'>   </p>", "#x") == "   "


def test_indentation_inside_nested_markup_is_kept():
    html = "<ul id='list'>\n    <li>one</li>\n    <li>two</li>\n</ul>"
    assert extract_text(html, "#list") == "\n    one\n    two\n"


def test_script_and_style_text_is_included():
    html = "<div id='x'>Hi <script>var a = 1;</script><style>p{}</style>there</div>"
    assert extract_text(html, "#x") == "Hi var a = 1;p{}there"


def test_element_holding_only_style_has_text():
    assert extract_text("<div id='x'><style>p{}</style></div>", "#x") == "p{}"


def test_paragraph_closed_by_block_element():
    html = "<html><body><p id='x'>a<div>b</div></p></body></html>"
    assert extract_text(html, "#x") == "a"


def test_pseudo_element_selector_is_a_parse_error(sample_html):
    with pytest.raises(ParseError, match="unable to parse selector"):
        extract_text(sample_html, "p::before")
