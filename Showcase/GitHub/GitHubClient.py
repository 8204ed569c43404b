"""
Lightweight GitHub API client to centralize HTTP interactions and error handling.
"""
from typing import Any, Dict, Optional, List
import base64
import logging
import os
import requests
from Showcase.Exception.GitHubError import GitHubError, GitHubParseError

logger = logging.getLogger(__name__)

DEFAULT_API_ROOT = "https://api.github.com"


class GitHubClient:
    def __init__(self, token: Optional[str] = None, session: Optional[requests.Session] = None, api_root: Optional[str] = None):
        self.session = session or requests.Session()
        token = token or os.environ.get("GITHUB_TOKEN") or os.environ.get("GH_TOKEN")
        if token:
            self.session.headers.update({"Authorization": f"token {token}"})
        # Accept header to read topics
        self.session.headers.update({"Accept": "application/vnd.github.mercy-preview+json"})
        self.base = (api_root or os.environ.get("GITHUB_API_ROOT") or DEFAULT_API_ROOT).rstrip("/")

    def _handle_response(self, response: requests.Response, resource: Optional[str] = None) -> Any:
        if response.status_code == 404:
            raise GitHubError(f"Resource not found: {resource}", 404)
        elif response.status_code == 401:
            raise GitHubError("Unauthorized: Invalid GitHub token", 401)
        elif response.status_code == 403:
            raise GitHubError("Forbidden or rate limited by GitHub API", 429)
        elif not 200 <= response.status_code < 300:
            raise GitHubError(f"GitHub API error: {response.status_code}", response.status_code)
        try:
            return response.json()
        except ValueError as exc:
            raise GitHubParseError(f"Malformed JSON from {resource}: {exc}", response.status_code) from exc

    def get_json(self, path: str, params: Optional[Dict[str, Any]] = None) -> Any:
        url = f"{self.base}{path}"
        logger.debug("GET %s params=%s", url, params)
        try:
            response = self.session.get(url, params=params)
        except requests.exceptions.RequestException as exc:
            raise GitHubError(f"Request to {url} failed: {exc}", 0) from exc
        return self._handle_response(response, path)

    def list_org_repos(self, org: str, per_page: int = 100) -> List[Dict[str, Any]]:
        """Collect every repository of `org`, one page at a time.

        Stops on the first page holding fewer than `per_page` items.
        """
        repos: List[Dict[str, Any]] = []
        page = 1
        while True:
            data = self.get_json(f"/orgs/{org}/repos", params={"per_page": per_page, "page": page})
            if not isinstance(data, list):
                raise GitHubParseError(f"Expected a list of repositories for {org}, page {page}")
            repos.extend(data)
            if len(data) < per_page:
                break
            page += 1
        logger.info("Listed %d repositories for %s", len(repos), org)
        return repos

    def get_topics(self, org: str, name: str) -> List[str]:
        data = self.get_json(f"/repos/{org}/{name}/topics")
        if not isinstance(data, dict):
            raise GitHubParseError(f"Expected a topics object for {org}/{name}")
        return list(data.get("names") or [])

    def get_readme(self, org: str, name: str) -> str:
        data = self.get_json(f"/repos/{org}/{name}/readme")
        content = data.get("content") if isinstance(data, dict) else None
        if not content:
            return ""
        try:
            raw = base64.b64decode(content)
        except ValueError as exc:
            raise GitHubParseError(f"README content for {org}/{name} is not base64: {exc}") from exc
        return raw.decode("utf-8", errors="replace")
