"""Domain models for parsed Scholar results."""

from scholar_parser.domain.models import ParsedResultsPage, ScholarArticle

__all__ = ["ScholarArticle", "ParsedResultsPage"]
