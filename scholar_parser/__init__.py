"""
Scholar Parser - structured records from Google Scholar result pages.

This package provides utilities for:
- Parsing saved or fetched Scholar result pages into article records
- Adapting to the result layouts Scholar has served over time
- Common CLI utilities for scripts
"""

import logging

# Set up NullHandler to prevent "No handler found" warnings
# when used as a library. Applications should configure their own handlers.
logging.getLogger(__name__).addHandler(logging.NullHandler())

__version__ = "0.1.0"

# Re-export commonly used items
from scholar_parser.config import get_scholar_layout, get_scholar_site
from scholar_parser.domain.models import ParsedResultsPage, ScholarArticle
from scholar_parser.parsing.base import (
    CollectingArticleParser,
    ScholarArticleParser,
    parse_results_page,
)

__all__ = [
    "__version__",
    # Config
    "get_scholar_site",
    "get_scholar_layout",
    # Models
    "ScholarArticle",
    "ParsedResultsPage",
    # Parsers
    "ScholarArticleParser",
    "CollectingArticleParser",
    "parse_results_page",
]
