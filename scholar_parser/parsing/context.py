"""Per-page parsing state threaded through layouts and link parsing."""

import re
from dataclasses import dataclass

from bs4 import BeautifulSoup


@dataclass(frozen=True)
class ParseContext:
    """State of one parse() call: the page tree plus the site configuration."""

    soup: BeautifulSoup
    site: str
    year_pattern: re.Pattern
