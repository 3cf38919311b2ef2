"""
BeautifulSoup adapter for Scholar result pages.

Builds the tree once per page and provides the few node predicates the
parser relies on.
"""

import logging
import warnings

from bs4 import BeautifulSoup, FeatureNotFound, XMLParsedAsHTMLWarning
from bs4.element import Comment, Tag

from scholar_parser.config import get_html_parser
from scholar_parser.constants import RESULT_CONTAINER_CLASS, RESULT_CONTAINER_TAG

logger = logging.getLogger(__name__)


def make_soup(html: str, features: str | None = None) -> BeautifulSoup:
    """
    Parse raw HTML into a BeautifulSoup tree.

    Args:
        html: Page markup
        features: Tree builder to use (default: configured html_parser, usually lxml)

    Returns:
        BeautifulSoup root
    """
    features = features or get_html_parser()
    # Some saved pages are served as XHTML
    with warnings.catch_warnings():
        warnings.filterwarnings("ignore", category=XMLParsedAsHTMLWarning)
        try:
            return BeautifulSoup(html, features)
        except FeatureNotFound:
            logger.debug(f"Tree builder {features!r} unavailable, using html.parser")
            return BeautifulSoup(html, "html.parser")


def has_class(node, klass: str) -> bool:
    """
    Check whether klass is one of the node's classes.

    bs4 normally returns the class attribute as a list, but builders
    configured without multi-valued attributes return a plain string.
    """
    if not isinstance(node, Tag):
        return False
    classes = node.get("class") or []
    if isinstance(classes, str):
        classes = classes.split()
    return klass in classes


def is_result_container(node) -> bool:
    """True for the div that wraps one search result."""
    return (
        isinstance(node, Tag)
        and node.name == RESULT_CONTAINER_TAG
        and has_class(node, RESULT_CONTAINER_CLASS)
    )


def element_children(node: Tag) -> list[Tag]:
    """Immediate children that are tags (text nodes skipped)."""
    return [child for child in node.children if isinstance(child, Tag)]


def text_fragments(node: Tag) -> list[str]:
    """All descendant text nodes, in document order."""
    return [str(s) for s in node.find_all(string=True) if not isinstance(s, Comment)]
