from typing import Dict, List, Optional

from Showcase.Business.RepoEnricher import RepoEnricher
from Showcase.Events.event_dispatcher import EventDispatcher
from Showcase.GitHub.GitHubClient import GitHubClient
from Showcase.Grouping.GroupingProvider import GroupingProvider
from Showcase.Model.Repository import Repository
from Showcase.Render.PageRenderer import PageRenderer
from Showcase.Utility.SiteConfiguration import SiteConfig
from Showcase.Utility.writer import read_fragment, write_page

import logging
logger = logging.getLogger(__name__)


class SiteBusiness:

    """Runs the list -> enrich -> group -> render -> write pipeline for one organization.
    Emits events via `EventDispatcher` (build_started, repos_listed, repo_enriched,
    repo_skipped, build_completed, pages_written).
    """
    def __init__(self, config: SiteConfig, client: Optional[GitHubClient] = None, dispatcher: Optional[EventDispatcher] = None):
        self.config = config
        self.client = client or GitHubClient(token=config.token, api_root=config.api_root)
        self.dispatcher = dispatcher or EventDispatcher()

    def BuildSite(self) -> Dict[str, str]:
        config = self.config
        self.dispatcher.dispatch("build_started", org=config.org)

        listing = self.client.list_org_repos(config.org, config.per_page)
        self.dispatcher.dispatch("repos_listed", count=len(listing))

        enriched = []
        for item in listing:
            repo = Repository.from_api(item)
            record = RepoEnricher.EnrichRepository(repo, self.client, config)
            if record is None:
                self.dispatcher.dispatch("repo_skipped", name=repo.name)
                continue
            enriched.append(record)
            self.dispatcher.dispatch("repo_enriched", repo=record)

        strategy = GroupingProvider.InitializeStrategy(config.grouping, config.topic_labels)
        fragment = read_fragment(config.fragment_path)

        pages = {
            config.all_filename: PageRenderer.RenderListing(enriched, strategy, config, fragment),
            config.featured_filename: PageRenderer.RenderFeatured(enriched, strategy, config, fragment),
        }
        logger.info("Rendered %d repositories into %d pages", len(enriched), len(pages))
        self.dispatcher.dispatch("build_completed", pages=list(pages))
        return pages

    def PublishSite(self) -> List[str]:
        # render everything first so a failure leaves no partial output
        pages = self.BuildSite()
        paths = [write_page(self.config.output_dir, name, body) for name, body in pages.items()]
        self.dispatcher.dispatch("pages_written", paths=paths)
        return paths
