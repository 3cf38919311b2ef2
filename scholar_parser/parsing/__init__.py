"""
Parsing of Google Scholar result pages.

ScholarArticleParser drives a page; layouts adapt it to the markup Scholar
served at different times.
"""

from scholar_parser.constants import DEFAULT_LAYOUT
from scholar_parser.parsing.base import (
    CollectingArticleParser,
    ScholarArticleParser,
    parse_results_page,
)
from scholar_parser.parsing.layouts import (
    ArticleLayout,
    ClassicLayout,
    Layout120201,
    Layout120726,
    available_layouts,
    get_layout,
)

__all__ = [
    "ScholarArticleParser",
    "CollectingArticleParser",
    "parse_results_page",
    "ArticleLayout",
    "ClassicLayout",
    "Layout120201",
    "Layout120726",
    "DEFAULT_LAYOUT",
    "available_layouts",
    "get_layout",
]
