"""
Base parser for Google Scholar result pages.

ScholarArticleParser owns the page-level pipeline: build the tree, report
the total result count, walk the result containers, let the active layout
populate a record per container, clean it, and hand valid records to
handle_article(). Layout differences live in scholar_parser.parsing.layouts.

Example:
    class PrintingParser(ScholarArticleParser):
        def handle_article(self, article):
            print(article.title, article.year)

    PrintingParser(layout="120201").parse(html)
"""

import logging
import re

from bs4.element import Tag

from scholar_parser.config import get_scholar_layout, get_scholar_site
from scholar_parser.constants import GLOBAL_STATS_ID, YEAR_PATTERN
from scholar_parser.domain.models import ParsedResultsPage, ScholarArticle
from scholar_parser.parsing.context import ParseContext
from scholar_parser.parsing.layouts import ArticleLayout, get_layout
from scholar_parser.parsing.soup import is_result_container, make_soup, text_fragments
from scholar_parser.parsing.text import parse_group_integer

logger = logging.getLogger(__name__)


class ScholarArticleParser:
    """
    Parses HTML result pages obtained from Google Scholar.

    Override handle_article() and handle_num_results() to receive results.
    Per-page state lives in a ParseContext local to each parse() call, so an
    instance keeps only its configuration between calls.
    """

    def __init__(self, site: str | None = None, layout: ArticleLayout | str | None = None):
        """
        Args:
            site: Base URL for relative links (default: configured scholar_site)
            layout: Layout instance or registered name (default: configured scholar_layout)

        Raises:
            ValueError: If layout names no registered layout
        """
        self.site = (site or get_scholar_site()).rstrip("/")
        if layout is None:
            layout = get_scholar_layout()
        self.layout = get_layout(layout) if isinstance(layout, str) else layout
        self.year_re = re.compile(YEAR_PATTERN)

    def handle_article(self, article: ScholarArticle) -> None:
        """
        Called once per successfully parsed article, in document order.

        The base implementation does nothing.
        """
        pass

    def handle_num_results(self, num_results: int) -> None:
        """
        Called at most once per page with the total result count the page reports.

        The base implementation forwards to handle_numResults(), so parsers
        overriding that older name keep working.
        """
        self.handle_numResults(num_results)

    def handle_numResults(self, num_results: int) -> None:  # noqa: N802
        """Legacy name of handle_num_results(); does nothing by default."""
        pass

    def parse(self, html: str) -> None:
        """
        Parse a results page and report its articles through the callbacks.

        Containers that yield no title are skipped. Exceptions raised by the
        callbacks propagate and stop the remaining iteration.
        """
        context = ParseContext(soup=make_soup(html), site=self.site, year_pattern=self.year_re)

        # Global, non-itemized attributes of the page
        self._parse_globals(context)

        emitted = 0
        skipped = 0
        for div in context.soup.find_all(is_result_container):
            article = self._parse_article(div, context)
            self._clean_article(article)
            if article.title:
                self.handle_article(article)
                emitted += 1
            else:
                skipped += 1
                logger.debug("Skipping result container without title")

        logger.debug(
            f"Parsed {emitted} articles with layout {self.layout.name} "
            f"({skipped} containers skipped)"
        )

    def _parse_globals(self, context: ParseContext) -> None:
        tag = context.soup.find("div", id=GLOBAL_STATS_ID)
        if tag is None:
            logger.debug("No result count on page")
            return

        # Body contains <b> etc, so the count is in the first text fragment
        fragments = [f for f in text_fragments(tag) if f.strip()]
        if not fragments:
            return

        tokens = fragments[0].split()
        num_results = parse_group_integer(tokens[1]) if len(tokens) > 1 else None
        if num_results is None:
            logger.debug(f"Unrecognized result count text: {fragments[0]!r}")
            return

        self.handle_num_results(num_results)

    def _parse_article(self, div: Tag, context: ParseContext) -> ScholarArticle:
        return self.layout.extract(div, context)

    def _clean_article(self, article: ScholarArticle) -> None:
        """Polish a freshly extracted article before the title check."""
        if article.title:
            article.title = article.title.strip()


class CollectingArticleParser(ScholarArticleParser):
    """Parser that keeps the articles and result count of the last parsed page."""

    def __init__(self, site: str | None = None, layout: ArticleLayout | str | None = None):
        super().__init__(site=site, layout=layout)
        self.articles: list[ScholarArticle] = []
        self.num_results: int | None = None

    def parse(self, html: str) -> None:
        self.articles = []
        self.num_results = None
        super().parse(html)

    def handle_article(self, article: ScholarArticle) -> None:
        self.articles.append(article)

    def handle_num_results(self, num_results: int) -> None:
        self.num_results = num_results


def parse_results_page(
    html: str, site: str | None = None, layout: ArticleLayout | str | None = None
) -> ParsedResultsPage:
    """
    Parse a results page in one call.

    Args:
        html: Page markup
        site: Base URL for relative links (default: configured scholar_site)
        layout: Layout instance or registered name (default: configured scholar_layout)

    Returns:
        ParsedResultsPage with the valid articles and reported result count
    """
    parser = CollectingArticleParser(site=site, layout=layout)
    parser.parse(html)
    return ParsedResultsPage(articles=parser.articles, num_results=parser.num_results)
