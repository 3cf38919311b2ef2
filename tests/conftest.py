"""
Pytest configuration and shared fixtures for scholar_parser tests.

The page builders below produce minimal result pages in each layout
Scholar has served, so tests never depend on saved pages or the network.
"""

import os

# Set test environment variables if not already set
if not os.getenv("SCHOLAR_SITE"):
    os.environ["SCHOLAR_SITE"] = "https://scholar.google.com"
if not os.getenv("SCHOLAR_LAYOUT"):
    os.environ["SCHOLAR_LAYOUT"] = "120726"

SITE = "https://scholar.google.com"


def results_page(*results: str, stats: str | None = None) -> str:
    """Wrap result containers (and an optional stats line) in a page."""
    stats_html = f'<div id="gs_ab_md">{stats}</div>' if stats is not None else ""
    return (
        "<html><head><title>Scholar</title></head><body>"
        f"{stats_html}"
        f'<div id="gs_res_ccl_mid">{"".join(results)}</div>'
        "</body></html>"
    )


def footer_links(
    cites: str | None = "12345",
    num_citations: str = "42",
    cluster: str | None = "12345",
    num_versions: str = "7",
) -> str:
    """Footer anchors as Scholar renders them (with the num= page-size argument)."""
    links = []
    if cites is not None:
        links.append(f'<a href="/scholar?cites={cites}&amp;num=20">Cited by {num_citations}</a>')
    links.append('<a href="/scholar?q=related:abc:scholar.google.com/">Related articles</a>')
    if cluster is not None:
        links.append(
            f'<a href="/scholar?cluster={cluster}&amp;num=20">All {num_versions} versions</a>'
        )
    return " ".join(links)


def classic_result(
    title_html: str = "Classic <b>Paper</b>",
    href: str = "/url?q=classic",
    byline: str = "A Author - Journal, 1998",
    links: str | None = None,
) -> str:
    """Result container in the original layout (title in div.gs_rt > h3 > a)."""
    links = footer_links() if links is None else links
    title = (
        f'<div class="gs_rt"><h3><a href="{href}">{title_html}</a></h3></div>'
        if title_html
        else ""
    )
    return (
        '<div class="gs_r">'
        f"{title}"
        f'<font size="-1"><span class="gs_a">{byline}</span>'
        f'<span class="gs_fl">{links}</span></font>'
        "</div>"
    )


def result_120201(
    title_html: str | None = "<b>Big</b> Data",
    href: str = "http://example.org/big-data",
    byline: str = "J Smith, A Jones - Journal of X, 2019 - publisher.com",
    links: str | None = None,
) -> str:
    """Result container in the February 2012 layout."""
    links = footer_links() if links is None else links
    title = f'<h3 class="gs_rt"><a href="{href}">{title_html}</a></h3>' if title_html else ""
    return (
        '<div class="gs_r">'
        f"{title}"
        f'<div class="gs_a">{byline}</div>'
        f'<div class="gs_fl">{links}</div>'
        "</div>"
    )


def result_120726(
    heading: str | None = '<a href="https://example.org/paper">Deep <b>Learning</b></a>',
    byline: str = "Y LeCun, Y Bengio, G Hinton - nature, 2015 - nature.com",
    links: str | None = None,
    side_link: str | None = None,
) -> str:
    """Result container in the July 2012 layout (body nested in div.gs_ri)."""
    links = footer_links() if links is None else links
    side = (
        f'<div class="gs_ggs gs_fl"><div class="gs_ggsd"><div class="gs_or_ggsm">{side_link}'
        "</div></div></div>"
        if side_link
        else ""
    )
    title = f'<h3 class="gs_rt">{heading}</h3>' if heading else ""
    return (
        '<div class="gs_r gs_or gs_scl">'
        f"{side}"
        '<div class="gs_ri">'
        f"{title}"
        f'<div class="gs_a">{byline}</div>'
        '<div class="gs_rs">A snippet of the abstract.</div>'
        f'<div class="gs_fl gs_flb">{links}</div>'
        "</div></div>"
    )

