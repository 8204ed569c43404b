"""
Repository Showcase
Generate the static repository listing pages for a GitHub organization.
Usage:
    python main.py --org my-org
    python main.py --org my-org --grouping labels --require-description
    python main.py --verbose
"""

import argparse
import logging
import locale
import sys
from typing import List, Optional

from Showcase.Business.SiteBusiness import SiteBusiness
from Showcase.Exception.GitHubError import GitHubError
from Showcase.Utility.SiteConfiguration import GROUPING_POLICIES, SORT_FIELDS, SiteConfig
from Showcase.Utility.auth import mask_token
from Showcase.Utility.env import load_env_file
from Showcase.Utility.sorting import configure_collation
from Showcase.Utility.validators import validate_site_config

logger = logging.getLogger("showcase")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="Generate static HTML listings of an organization's GitHub repositories",
        epilog="""
            Examples:
            python main.py --org my-org                      # Group by every topic
            python main.py --org my-org --grouping labels    # Group by the fixed label table
            python main.py --org my-org --output-dir site    # Write pages into ./site
        """
    )
    parser.add_argument('--org', help='GitHub organization (default: $GITHUB_ORG)')
    parser.add_argument('--output-dir', help='Directory for the generated pages (default: .)')
    parser.add_argument('--grouping', choices=GROUPING_POLICIES, help='Grouping policy (default: topics)')
    parser.add_argument('--sort-field', choices=SORT_FIELDS, help='Field used to order entries (default: title)')
    parser.add_argument('--featured-topic', help='Topic marking featured repositories (default: featured)')
    parser.add_argument('--fragment', help='HTML fragment appended to both pages')
    parser.add_argument('--no-readme', action='store_true', help='Do not fetch README files')
    parser.add_argument('--require-description', action='store_true',
                        help='Leave out repositories without a description')
    parser.add_argument('--skip-on-topic-error', action='store_true',
                        help='Leave out repositories whose topics cannot be fetched')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')
    return parser


def main(argv: Optional[List[str]] = None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    try:
        logger.debug("Collation locale: %s", configure_collation())
    except locale.Error as e:
        logger.warning("Could not apply the environment locale, sorting with C collation: %s", e)
    load_env_file()

    try:
        config = validate_site_config(SiteConfig.from_env(
            org=args.org,
            output_dir=args.output_dir,
            grouping=args.grouping,
            sort_field=args.sort_field,
            featured_topic=args.featured_topic,
            fragment_path=args.fragment,
            fetch_readme=False if args.no_readme else None,
            require_description=True if args.require_description else None,
            skip_on_topic_error=True if args.skip_on_topic_error else None,
        ))
    except ValueError as e:
        logger.error("Invalid configuration: %s", e)
        return 2

    logger.info("Building pages for %s (token: %s)", config.org, mask_token(config.token))
    try:
        paths = SiteBusiness(config).PublishSite()
    except GitHubError as e:
        logger.error("GitHub API error (%s): %s", e.status_code, e.message)
        return 1
    except Exception as e:
        logger.exception("Site generation failed: %s", e)
        return 1

    logger.info("Pages generated: %s", ", ".join(paths))
    return 0


if __name__ == '__main__':
    sys.exit(main())
