from parsing.extraction import inner_html
from parsing.loader import body_element, document_element, head_element, load_document
from parsing.namespaces import SVG_NAMESPACE


def test_fragment_has_no_shape_flags():
    doc = load_document("<p>x</p>")
    assert not doc.has_html_tag
    assert not doc.has_head_tag
    assert not doc.has_body_tag


def test_fragment_is_wrapped_in_implicit_document():
    doc = load_document("<p>x</p>")
    assert document_element(doc.soup) is not None
    assert head_element(doc.soup) is not None
    assert inner_html(body_element(doc.soup)) == "<p>x</p>"


def test_shape_flags_are_case_insensitive():
    doc = load_document('<HTML lang="en"><HEAD></HEAD><Body class="x"></Body></HTML>')
    assert doc.has_html_tag
    assert doc.has_head_tag
    assert doc.has_body_tag


def test_header_tag_is_not_a_head_tag():
    doc = load_document("<header>x</header><bodyguard></bodyguard>")
    assert not doc.has_head_tag
    assert not doc.has_body_tag


def test_malformed_markup_is_closed():
    doc = load_document("<div><p>unclosed")
    assert inner_html(body_element(doc.soup)) == "<div><p>unclosed</p></div>"


def test_svg_elements_keep_their_namespace():
    doc = load_document('<svg><use xlink:href="#id"></use></svg>')
    use = doc.soup.find("use")
    assert use.namespace == SVG_NAMESPACE
    assert use.get("xlink:href") == "#id"


def test_class_attribute_stays_a_string():
    doc = load_document('<p class="a  b">x</p>')
    assert doc.soup.find("p")["class"] == "a  b"


def test_each_load_builds_a_fresh_tree():
    first = load_document("<p>x</p>")
    second = load_document("<p>x</p>")
    first.soup.find("p").extract()
    assert second.soup.find("p") is not None
