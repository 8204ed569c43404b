from Showcase.Utility.SiteConfiguration import GROUPING_POLICIES, SORT_FIELDS, SiteConfig


def validate_site_config(config: SiteConfig) -> SiteConfig:
    if not config.org:
        raise ValueError("An organization is required (--org or GITHUB_ORG)")
    if not isinstance(config.per_page, int) or config.per_page < 1 or config.per_page > 100:
        raise ValueError("per_page must be integer between 1 and 100")
    if config.sort_field not in SORT_FIELDS:
        raise ValueError(f"sort_field must be one of {', '.join(SORT_FIELDS)}")
    if config.grouping not in GROUPING_POLICIES:
        raise ValueError(f"grouping must be one of {', '.join(GROUPING_POLICIES)}")
    if "{name}" not in config.pages_url:
        raise ValueError("pages_url must contain a {name} placeholder")
    if config.all_filename == config.featured_filename:
        raise ValueError("The two pages need distinct filenames")
    return config
