"""
Markup constants for Google Scholar result pages.

Class names and identifiers are the ones Scholar serves in its result markup.
"""

# Layout parsers use unless configured otherwise
DEFAULT_LAYOUT = "120726"

# Default site used to resolve relative links
DEFAULT_SCHOLAR_SITE = "https://scholar.google.com"

# Result containers
RESULT_CONTAINER_TAG = "div"
RESULT_CONTAINER_CLASS = "gs_r"

# Page-level stats ("About 1,230 results (0.05 sec)")
GLOBAL_STATS_ID = "gs_ab_md"

# Per-result markup
TITLE_CLASS = "gs_rt"
BYLINE_CLASS = "gs_a"
FOOTER_LINKS_CLASS = "gs_fl"
RESULT_BODY_CLASS = "gs_ri"
SIDE_LINK_CLASSES = ("gs_ggs", "gs_or_ggsm")
TITLE_MARKER_CLASSES = ("gs_ct1", "gs_ct2", "gs_ctc", "gs_ctu")

# Footer link targets
CITATIONS_PATH_PREFIX = "/scholar?cites"
VERSIONS_PATH_PREFIX = "/scholar?cluster"
CITED_BY_TEXT_PREFIX = "Cited by"
VERSIONS_TEXT_PREFIX = "All "

# Query argument Scholar appends to footer links (results per page)
RESULTS_PER_PAGE_ARG = "num"
CITES_ARG = "cites"

# Four-digit year beginning with 19 or 20
YEAR_PATTERN = r"\b(?:19|20)\d{2}\b"

# Characters used as thousands separators in the result count
GROUP_SEPARATORS = (",", ".", "'", "\u00a0", "\u202f")
