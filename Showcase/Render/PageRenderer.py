"""
HTML rendering for the repository listing pages.
Plain string templates; everything taken from repository data is escaped.
"""
import html
from typing import Dict, List

from Showcase.Grouping.Interface.IGroupingStrategy import IGroupingStrategy
from Showcase.Model.EnrichedRepository import EnrichedRepository
from Showcase.Utility.SiteConfiguration import SiteConfig

PAGE_TEMPLATE = """<!DOCTYPE html>
<html>
<head>
  <meta charset="utf-8">
  <title>{title}</title>
  <link rel="stylesheet" href="{stylesheet}">
</head>
<body>
  <h1>{title}</h1>
  {sections}
{extra}  <footer>
    <p>Generated from the GitHub repositories of this organization.</p>
  </footer>
</body>
</html>
"""


class PageRenderer:

    @staticmethod
    def RenderItem(repo: EnrichedRepository, with_blurb: bool = False) -> str:
        cls = ' class="archived"' if repo.archived else ""
        link = (
            f'<a{cls} href="{html.escape(repo.url)}" target="_blank" '
            f'rel="noopener noreferrer">{html.escape(repo.display_text)}</a>'
        )
        if not with_blurb:
            return f"<li>{link}</li>"
        blurb = f'<p class="blurb">{html.escape(repo.blurb)}</p>' if repo.blurb else ""
        return f"<li>\n  {link}\n  {blurb}\n</li>"

    @staticmethod
    def RenderGroups(groups: Dict[str, List[EnrichedRepository]], with_blurbs: bool = False) -> str:
        sections = []
        for heading, repos in groups.items():
            items = "\n".join(PageRenderer.RenderItem(r, with_blurbs) for r in repos)
            sections.append(f"<h2>{html.escape(heading)}</h2>\n<ul>\n{items}\n</ul>")
        return "\n\n".join(sections)

    @staticmethod
    def RenderPage(title: str, sections: str, stylesheet: str = "style.css", extra_html: str = "") -> str:
        extra = f"{extra_html.rstrip()}\n" if extra_html else ""
        return PAGE_TEMPLATE.format(
            title=html.escape(title),
            stylesheet=html.escape(stylesheet),
            sections=sections,
            extra=extra,
        )

    @staticmethod
    def RenderListing(repos: List[EnrichedRepository], strategy: IGroupingStrategy, config: SiteConfig, extra_html: str = "") -> str:
        groups = strategy.Group(repos, config.sort_field)
        return PageRenderer.RenderPage(config.all_title, PageRenderer.RenderGroups(groups), config.stylesheet, extra_html)

    @staticmethod
    def RenderFeatured(repos: List[EnrichedRepository], strategy: IGroupingStrategy, config: SiteConfig, extra_html: str = "") -> str:
        featured = [r for r in repos if config.featured_topic in r.topics]
        groups = strategy.Group(featured, config.sort_field)
        return PageRenderer.RenderPage(
            config.featured_title, PageRenderer.RenderGroups(groups, with_blurbs=True), config.stylesheet, extra_html
        )
