"""
Footer link parsing shared by every result layout.

The footer of a result carries "Cited by N" and "All N versions" links.
Both are classified by their target path and copied onto the article.
"""

from bs4.element import Tag

from scholar_parser.constants import (
    CITATIONS_PATH_PREFIX,
    CITED_BY_TEXT_PREFIX,
    CITES_ARG,
    RESULTS_PER_PAGE_ARG,
    VERSIONS_PATH_PREFIX,
    VERSIONS_TEXT_PREFIX,
)
from scholar_parser.domain.models import ScholarArticle
from scholar_parser.parsing.context import ParseContext
from scholar_parser.parsing.text import as_integer, get_url_arg, path_to_url, strip_url_arg


def parse_links(container: Tag, article: ScholarArticle, context: ParseContext) -> None:
    """
    Copy citation and version links from a footer container onto article.

    Args:
        container: Footer element holding the result's links
        article: Record being populated (mutated in place)
        context: ParseContext of the current page (supplies the site URL)

    Later matching anchors overwrite earlier ones.
    """
    for anchor in container.find_all("a", href=True):
        href = anchor["href"]
        text = " ".join(anchor.get_text().split())

        if href.startswith(CITATIONS_PATH_PREFIX):
            if text.startswith(CITED_BY_TEXT_PREFIX):
                count = as_integer(text.split()[-1])
                if count is not None:
                    article.num_citations = count

            # Drop the page-size argument Scholar appends to footer links
            article.url_citations = strip_url_arg(
                path_to_url(context.site, href), RESULTS_PER_PAGE_ARG
            )
            article.cluster_id = _cluster_ids(article.url_citations)

        elif href.startswith(VERSIONS_PATH_PREFIX):
            if text.startswith(VERSIONS_TEXT_PREFIX):
                tokens = text.split()
                count = as_integer(tokens[1]) if len(tokens) > 1 else None
                if count is not None:
                    article.num_versions = count

            article.url_versions = strip_url_arg(
                path_to_url(context.site, href), RESULTS_PER_PAGE_ARG
            )


def _cluster_ids(url: str) -> list[str]:
    """Cluster IDs named by the cites= argument (comma-separated when merged)."""
    value = get_url_arg(url, CITES_ARG)
    if not value:
        return []
    return [cid for cid in value.split(",") if cid]
