"""
Result layouts served by Google Scholar over time.

Each layout knows where one result container keeps its title link, byline
and footer links. Layouts are selected by name when a parser is built;
everything else (link parsing, cleanup, page stats) is shared.

Example:
    class MyLayout(ArticleLayout):
        @property
        def name(self) -> str:
            return "mylayout"

        def extract(self, div, context) -> ScholarArticle:
            article = ScholarArticle()
            ...
            return article
"""

from abc import ABC, abstractmethod

from bs4.element import Comment, Tag

from scholar_parser.constants import (
    BYLINE_CLASS,
    FOOTER_LINKS_CLASS,
    RESULT_BODY_CLASS,
    SIDE_LINK_CLASSES,
    TITLE_CLASS,
    TITLE_MARKER_CLASSES,
)
from scholar_parser.domain.models import ScholarArticle
from scholar_parser.parsing.context import ParseContext
from scholar_parser.parsing.links import parse_links
from scholar_parser.parsing.soup import element_children, has_class, text_fragments
from scholar_parser.parsing.text import find_year, path_to_url


class ArticleLayout(ABC):
    """
    Base interface for result layouts.

    This is the "plug-in" interface - implement this to follow a new
    arrangement of Scholar's result markup.
    """

    @property
    @abstractmethod
    def name(self) -> str:
        """
        Registry name of this layout.

        Returns:
            Date the layout was first observed (YYMMDD), e.g. "120201"
        """
        pass

    @abstractmethod
    def extract(self, div: Tag, context: ParseContext) -> ScholarArticle:
        """
        Build a record from one result container.

        Args:
            div: Result container element
            context: State of the current parse() call

        Returns:
            A fresh ScholarArticle; fields whose markup is absent stay unset
        """
        pass

    def _set_title_link(
        self, article: ScholarArticle, anchor: Tag, context: ParseContext
    ) -> None:
        # Titles are often split by <b> highlights: join every fragment
        article.title = "".join(text_fragments(anchor))
        href = anchor.get("href")
        if href:
            article.url = path_to_url(context.site, href)
            if article.url.endswith(".pdf"):
                article.url_pdf = article.url

    def _set_year(self, article: ScholarArticle, byline: Tag, context: ParseContext) -> None:
        article.year = find_year(byline.get_text(), context.year_pattern)


class ClassicLayout(ArticleLayout):
    """Original layout: title in div.gs_rt > h3 > a, links inside <font>."""

    @property
    def name(self) -> str:
        return "2011"

    def extract(self, div: Tag, context: ParseContext) -> ScholarArticle:
        article = ScholarArticle()

        for tag in element_children(div):
            if tag.name == "div" and has_class(tag, TITLE_CLASS) and tag.h3 and tag.h3.a:
                self._set_title_link(article, tag.h3.a, context)

            if tag.name == "font":
                for tag2 in element_children(tag):
                    if tag2.name != "span":
                        continue
                    if has_class(tag2, BYLINE_CLASS):
                        self._set_year(article, tag2, context)
                    if has_class(tag2, FOOTER_LINKS_CLASS):
                        parse_links(tag2, article, context)

        return article


class Layout120201(ArticleLayout):
    """Layout of February 2012: h3.gs_rt, div.gs_a and div.gs_fl as direct children."""

    @property
    def name(self) -> str:
        return "120201"

    def extract(self, div: Tag, context: ParseContext) -> ScholarArticle:
        article = ScholarArticle()

        for tag in element_children(div):
            if tag.name == "h3" and has_class(tag, TITLE_CLASS) and tag.a:
                self._set_title_link(article, tag.a, context)

            if tag.name == "div" and has_class(tag, BYLINE_CLASS):
                self._set_year(article, tag, context)

            if tag.name == "div" and has_class(tag, FOOTER_LINKS_CLASS):
                parse_links(tag, article, context)

        return article


class Layout120726(ArticleLayout):
    """
    Layout of July 2012 onwards.

    The result body moved into div.gs_ri; a sibling side link (div.gs_ggs,
    later div.gs_or_ggsm) carries the direct PDF or full-text link.
    Citation-only results have a heading without an anchor.
    """

    @property
    def name(self) -> str:
        return "120726"

    def extract(self, div: Tag, context: ParseContext) -> ScholarArticle:
        article = ScholarArticle()

        for tag in element_children(div):
            if tag.name != "div":
                continue
            if any(has_class(tag, klass) for klass in SIDE_LINK_CLASSES):
                self._parse_side_link(article, tag, context)
            elif has_class(tag, RESULT_BODY_CLASS):
                self._parse_body(article, tag, context)

        return article

    def _parse_body(self, article: ScholarArticle, body: Tag, context: ParseContext) -> None:
        for tag in element_children(body):
            if tag.name == "h3" and has_class(tag, TITLE_CLASS):
                anchor = tag.find("a")
                if anchor is not None:
                    self._set_title_link(article, anchor, context)
                else:
                    article.title = _heading_text(tag)

            if tag.name == "div" and has_class(tag, BYLINE_CLASS):
                self._set_year(article, tag, context)

            if tag.name == "div" and has_class(tag, FOOTER_LINKS_CLASS):
                parse_links(tag, article, context)

    def _parse_side_link(self, article: ScholarArticle, tag: Tag, context: ParseContext) -> None:
        anchor = tag.find("a", href=True)
        if anchor is None:
            return
        url = path_to_url(context.site, anchor["href"])
        if url.endswith(".pdf") or "[PDF]" in anchor.get_text():
            article.url_pdf = url


def _heading_text(heading: Tag) -> str:
    """Heading text without the [CITATION]/[BOOK] marker spans."""
    return "".join(
        str(fragment)
        for fragment in heading.find_all(string=True)
        if not isinstance(fragment, Comment) and not _inside_marker(fragment, heading)
    )


def _inside_marker(fragment, heading: Tag) -> bool:
    for parent in fragment.parents:
        if parent is heading:
            return False
        if any(has_class(parent, klass) for klass in TITLE_MARKER_CLASSES):
            return True
    return False


_LAYOUTS: dict[str, type[ArticleLayout]] = {
    "2011": ClassicLayout,
    "120201": Layout120201,
    "120726": Layout120726,
}


def available_layouts() -> list[str]:
    """Names of all registered layouts, oldest first."""
    return list(_LAYOUTS)


def get_layout(name: str) -> ArticleLayout:
    """
    Instantiate a registered layout by name.

    Raises:
        ValueError: If no layout is registered under name
    """
    try:
        return _LAYOUTS[name]()
    except KeyError:
        raise ValueError(
            f"Unknown layout {name!r}; expected one of {', '.join(available_layouts())}"
        ) from None
