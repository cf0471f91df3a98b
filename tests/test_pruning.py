from parsing.extraction import inner_html, outer_html
from parsing.loader import body_element, head_element, load_document
from parsing.pruning import (
    prune_meta,
    remove_attributes,
    remove_elements,
    select_targets,
    strip_comments,
)


def _body(soup) -> str:
    return inner_html(body_element(soup))


# --- select_targets ---

def test_select_targets_empty_selectors_is_noop():
    soup = load_document("<div><p>x</p></div>").soup
    assert select_targets(soup, []) == 0
    assert _body(soup) == "<div><p>x</p></div>"


def test_select_targets_keeps_selector_then_document_order():
    soup = load_document(
        '<div><p class="a">1</p><span>2</span><p class="a">3</p></div>'
    ).soup
    assert select_targets(soup, ["span", "p.a"]) == 3
    assert _body(soup) == '<span>2</span><p class="a">1</p><p class="a">3</p>'


def test_select_targets_duplicates_nested_matches():
    soup = load_document('<div class="x"><p>y</p></div>').soup
    select_targets(soup, ["div", "p"])
    assert _body(soup) == '<div class="x"><p>y</p></div><p>y</p>'


def test_select_targets_duplicates_repeated_matches():
    soup = load_document("<p>y</p>").soup
    select_targets(soup, ["p", "p"])
    assert _body(soup) == "<p>y</p><p>y</p>"


def test_select_targets_without_match_clears_body():
    soup = load_document("<div><p>x</p></div>").soup
    assert select_targets(soup, ["table"]) == 0
    assert _body(soup) == ""


def test_select_targets_can_pick_head_content():
    soup = load_document("<title>T</title><p>x</p>").soup
    select_targets(soup, ["title"])
    assert _body(soup) == "<title>T</title>"
    assert outer_html(head_element(soup)) == "<head><title>T</title></head>"


# --- remove_elements ---

def test_remove_elements_applies_selectors_in_order():
    soup = load_document("<div><p>a</p></div><p>b</p>").soup
    assert remove_elements(soup, ["div", "p"]) == 2
    assert _body(soup) == ""


def test_remove_elements_handles_nested_matches():
    soup = load_document("<div><div>x</div></div><span>keep</span>").soup
    assert remove_elements(soup, ["div"]) == 2
    assert _body(soup) == "<span>keep</span>"


def test_remove_elements_default_selectors():
    soup = load_document(
        "<script>x()</script><p>t</p><noscript>n</noscript><iframe></iframe>"
    ).soup
    remove_elements(soup, ["script", "noscript", "iframe", "style"])
    assert _body(soup) == "<p>t</p>"


# --- remove_attributes ---

def test_remove_attributes_removes_every_named_attribute():
    soup = load_document('<p style="a" class="b" ID="c">x</p><span id="d">y</span>').soup
    assert remove_attributes(soup, ["style", "id"]) == 3
    assert _body(soup) == '<p class="b">x</p><span>y</span>'


def test_remove_attributes_is_noop_when_absent():
    soup = load_document('<p class="b">x</p>').soup
    assert remove_attributes(soup, ["style"]) == 0
    assert remove_attributes(soup, []) == 0
    assert _body(soup) == '<p class="b">x</p>'


# --- prune_meta ---

def test_prune_meta_keeps_charset_and_viewport():
    soup = load_document(
        '<head><meta charset="utf-8"><meta name="viewport" content="w">'
        '<meta name="description" content="d"><meta property="og:title" content="t">'
        "</head>"
    ).soup
    assert prune_meta(soup) == 2
    assert outer_html(head_element(soup)) == (
        '<head><meta charset="utf-8"><meta name="viewport" content="w"></head>'
    )


# --- strip_comments ---

def test_strip_comments_at_every_depth():
    soup = load_document("<!--top--><div><!--a--><!--b--><p><!--c-->t</p></div>").soup
    assert strip_comments(soup) == 4
    assert _body(soup) == "<div><p>t</p></div>"


def test_strip_comments_covers_comments_outside_html():
    soup = load_document("<html><body><p>x</p></body></html><!--tail-->").soup
    assert strip_comments(soup) == 1
    assert "tail" not in soup.decode()
