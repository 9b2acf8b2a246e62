"""Tests for HTML tag stripping."""
import pytest
from orchid_scanner.utils.html import strip_tags


def test_empty_input():
    assert strip_tags("") == ""


def test_self_closing_tag_only():
    assert strip_tags("<br/>") == ""


def test_adjacent_and_nested_tags_collapse():
    assert strip_tags("<td><b></b></td><i></i>") == ""


def test_text_between_tags_kept_in_order():
    assert strip_tags('<td class="v">40°F min.</td> <b>to</b> 95°F') == "40°F min. to 95°F"


def test_unterminated_tag_drops_rest():
    assert strip_tags("Brazil <td class=") == "Brazil "


def test_no_entity_decoding():
    assert strip_tags("<p>Warm &amp; humid</p>") == "Warm &amp; humid"


def test_plain_text_unchanged():
    text = "Dry out between waterings"
    assert strip_tags(text) == text


@pytest.mark.parametrize("html", [
    "<a href='x'>link</a>",
    "a > b < c",
    "<<nested>>text<",
    "<div><ul><li>one</li><li>two</li></ul></div>",
    ">>stray",
])
def test_output_never_contains_angle_brackets(html):
    out = strip_tags(html)
    assert "<" not in out
    assert ">" not in out


def test_non_tag_characters_preserve_order():
    html = "<li>a</li>b<br>c<span>d</span>"
    assert strip_tags(html) == "abcd"
