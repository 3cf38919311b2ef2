"""
Unit tests for the BeautifulSoup adapter.
"""

from bs4 import BeautifulSoup

from scholar_parser.parsing.soup import (
    element_children,
    has_class,
    is_result_container,
    make_soup,
    text_fragments,
)


class TestMakeSoup:
    """Tests for make_soup function."""

    def test_builds_tree(self):
        soup = make_soup("<div id='a'><p>text</p></div>")
        assert soup.find("div", id="a").p.get_text() == "text"

    def test_unknown_builder_falls_back(self):
        """An unavailable tree builder falls back to html.parser."""
        soup = make_soup("<p>hello</p>", features="no-such-builder")
        assert soup.p.get_text() == "hello"

    def test_input_not_modified(self):
        html = "<div class='gs_r'><h3>t</h3></div>"
        make_soup(html)
        assert html == "<div class='gs_r'><h3>t</h3></div>"


class TestHasClass:
    """Tests for has_class function."""

    def test_class_list(self):
        tag = make_soup('<div class="gs_r gs_or">x</div>').div
        assert has_class(tag, "gs_r")
        assert has_class(tag, "gs_or")
        assert not has_class(tag, "gs")

    def test_class_string(self):
        """Builders without multi-valued attributes return a plain string."""
        soup = BeautifulSoup(
            '<div class="gs_r gs_or">x</div>', "html.parser", multi_valued_attributes=None
        )
        assert isinstance(soup.div["class"], str)
        assert has_class(soup.div, "gs_or")
        assert not has_class(soup.div, "gs")

    def test_no_class_attribute(self):
        assert not has_class(make_soup("<div>x</div>").div, "gs_r")

    def test_text_node(self):
        assert not has_class(make_soup("<div>x</div>").div.string, "gs_r")


class TestIsResultContainer:
    """Tests for is_result_container function."""

    def test_result_div(self):
        assert is_result_container(make_soup('<div class="gs_r gs_or gs_scl"></div>').div)

    def test_wrong_tag(self):
        assert not is_result_container(make_soup('<span class="gs_r"></span>').span)

    def test_wrong_class(self):
        assert not is_result_container(make_soup('<div class="gs_ri"></div>').div)


class TestTextHelpers:
    """Tests for element_children and text_fragments."""

    def test_element_children_skips_text(self):
        div = make_soup("<div>a<b>x</b> b <i>y</i></div>").div
        assert [child.name for child in element_children(div)] == ["b", "i"]

    def test_text_fragments_in_order(self):
        a = make_soup('<a href="/x"><b>Big </b>Data</a>').a
        assert text_fragments(a) == ["Big ", "Data"]

    def test_text_fragments_skip_comments(self):
        a = make_soup("<a>Big<!-- hidden --> Data</a>").a
        assert "".join(text_fragments(a)) == "Big Data"
