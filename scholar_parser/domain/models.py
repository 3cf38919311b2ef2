"""
Data models for parsed Scholar result pages.

These dataclasses represent one parsed search result and the
collected output of a whole results page.
"""

from dataclasses import asdict, dataclass, field, fields
from typing import Any


@dataclass
class ScholarArticle:
    """One search result as parsed from a result container."""

    title: str | None = None
    url: str | None = None
    url_pdf: str | None = None
    year: str | None = None  # Kept as text, as found in the byline
    num_citations: int | None = None
    url_citations: str | None = None
    cluster_id: list[str] = field(default_factory=list)
    num_versions: int | None = None
    url_versions: str | None = None

    @classmethod
    def field_names(cls) -> list[str]:
        return [f.name for f in fields(cls)]

    def __getitem__(self, key: str) -> Any:
        if key not in self.field_names():
            raise KeyError(key)
        return getattr(self, key)

    def __setitem__(self, key: str, value: Any) -> None:
        if key not in self.field_names():
            raise KeyError(key)
        setattr(self, key, value)

    def __contains__(self, key: object) -> bool:
        return key in self.field_names()

    def get(self, key: str, default: Any = None) -> Any:
        if key not in self.field_names():
            return default
        return getattr(self, key)

    def keys(self) -> list[str]:
        return self.field_names()

    def as_dict(self) -> dict[str, Any]:
        """Return a plain dict copy of all fields."""
        return asdict(self)

    @property
    def is_valid(self) -> bool:
        """A record is emitted only when it has a non-blank title."""
        return bool(self.title and self.title.strip())


@dataclass
class ParsedResultsPage:
    """All valid records of one results page, plus the reported total."""

    articles: list[ScholarArticle] = field(default_factory=list)
    num_results: int | None = None
