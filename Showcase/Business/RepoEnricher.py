"""
Turns listing entries into `EnrichedRepository` records using topics and README text.
"""
import logging
from typing import Optional

from Showcase.Exception.GitHubError import GitHubError
from Showcase.GitHub.GitHubClient import GitHubClient
from Showcase.Model.EnrichedRepository import EnrichedRepository
from Showcase.Model.Repository import Repository
from Showcase.Utility.SiteConfiguration import SiteConfig
from Showcase.Utility.readme import extract_title_and_blurb

logger = logging.getLogger(__name__)


class RepoEnricher:
    @staticmethod
    def EnrichRepository(repo: Repository, client: GitHubClient, config: SiteConfig) -> Optional[EnrichedRepository]:
        """Returns None when the repository is filtered out or skipped."""
        if config.require_description and not repo.description:
            logger.info("Skipping %s: no description", repo.name)
            return None

        try:
            topics = client.get_topics(config.org, repo.name)
        except GitHubError as e:
            if config.skip_on_topic_error:
                logger.warning("Skipping %s: topics unavailable (%s)", repo.name, e.message)
                return None
            logger.warning("Topics unavailable for %s, continuing without: %s", repo.name, e.message)
            topics = []

        title, blurb = "", ""
        if config.fetch_readme:
            try:
                readme = client.get_readme(config.org, repo.name)
            except GitHubError as e:
                logger.warning("README unavailable for %s: %s", repo.name, e.message)
                readme = ""
            title, blurb = extract_title_and_blurb(readme)

        return EnrichedRepository(
            name=repo.name,
            title=title or repo.description or repo.name,
            blurb=blurb,
            url=config.page_url(repo.name),
            archived=repo.archived,
            description=repo.description,
            topics=topics,
        )
