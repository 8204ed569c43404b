from dataclasses import dataclass, field, fields
from typing import Any, Dict, Optional

from Showcase.Utility.auth import get_github_token
from Showcase.Utility.env import env_flag, env_str


# Fixed topic -> heading table used by the "labels" grouping policy.
# Declaration order is the order sections appear on the page.
DEFAULT_TOPIC_LABELS: Dict[str, str] = {
    "workshop": "Workshops",
    "tutorial": "Tutorials",
    "data": "Data",
    "machine-learning": "Machine Learning",
    "visualization": "Visualization",
    "web": "Web",
    "tools": "Tools",
}

DEFAULT_PAGES_URL = "https://{org}.github.io/{name}/"
SORT_FIELDS = ("title", "description")
GROUPING_POLICIES = ("topics", "labels")


"""Settings for one site build. Use `from_env` to pick up the process environment."""
@dataclass
class SiteConfig:
    org: str
    token: Optional[str] = None
    api_root: Optional[str] = None
    per_page: int = 100
    pages_url: str = DEFAULT_PAGES_URL
    grouping: str = "topics"
    topic_labels: Dict[str, str] = field(default_factory=lambda: dict(DEFAULT_TOPIC_LABELS))
    sort_field: str = "title"
    featured_topic: str = "featured"
    fetch_readme: bool = True
    require_description: bool = False
    skip_on_topic_error: bool = False
    output_dir: str = "."
    all_filename: str = "all_test.html"
    featured_filename: str = "featured_workshops.html"
    all_title: str = "All Test Repositories"
    featured_title: str = "Featured Workshops"
    stylesheet: str = "style.css"
    fragment_path: Optional[str] = None

    @classmethod
    def from_env(cls, **overrides: Any) -> "SiteConfig":
        values: Dict[str, Any] = {
            "org": env_str("GITHUB_ORG", ""),
            "token": get_github_token(),
            "api_root": env_str("GITHUB_API_ROOT"),
            "pages_url": env_str("SHOWCASE_PAGES_URL", DEFAULT_PAGES_URL),
            "grouping": env_str("SHOWCASE_GROUPING", "topics"),
            "output_dir": env_str("SHOWCASE_OUTPUT_DIR", "."),
            "fragment_path": env_str("SHOWCASE_FRAGMENT"),
            "fetch_readme": env_flag("SHOWCASE_FETCH_README", True),
        }
        known = {f.name for f in fields(cls)}
        for key, value in overrides.items():
            if key not in known:
                raise TypeError(f"Unknown setting: {key}")
            if value is not None:
                values[key] = value
        return cls(**values)

    def page_url(self, name: str) -> str:
        return self.pages_url.format(org=self.org, name=name)
