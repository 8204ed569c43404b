import base64

import pytest
import requests

from Showcase.Exception.GitHubError import GitHubError, GitHubParseError
from Showcase.GitHub.GitHubClient import GitHubClient

API = "https://api.github.com"


class DummyResponse:
    def __init__(self, status_code, json_data=None):
        self.status_code = status_code
        self._json = json_data

    def json(self):
        if self._json is None:
            raise ValueError("No JSON")
        return self._json


class DummySession:
    def __init__(self, responses):
        # responses: dict of (url, page) -> DummyResponse
        self.responses = responses
        self.headers = {}
        self.calls = []

    def get(self, url, params=None):
        page = (params or {}).get("page")
        self.calls.append((url, page))
        return self.responses.get((url, page), DummyResponse(404))


class FailingSession(DummySession):
    def get(self, url, params=None):
        raise requests.exceptions.ConnectionError("connection refused")


def repos(prefix, count):
    return [{"name": f"{prefix}{i}", "description": None, "archived": False} for i in range(count)]


def test_token_sets_authorization_header():
    sess = DummySession({})
    GitHubClient(token="abc123", session=sess)
    assert sess.headers["Authorization"] == "token abc123"
    assert sess.headers["Accept"] == "application/vnd.github.mercy-preview+json"


def test_no_token_means_no_authorization_header(monkeypatch):
    monkeypatch.delenv("GITHUB_TOKEN", raising=False)
    monkeypatch.delenv("GH_TOKEN", raising=False)
    sess = DummySession({})
    GitHubClient(token=None, session=sess)
    assert "Authorization" not in sess.headers


def test_api_root_override():
    url = "https://ghe.example.com/api/v3/repos/org/x/topics"
    sess = DummySession({(url, None): DummyResponse(200, {"names": ["a"]})})
    client = GitHubClient(session=sess, api_root="https://ghe.example.com/api/v3/")
    assert client.get_topics("org", "x") == ["a"]


def test_list_org_repos_stops_on_short_page():
    url = f"{API}/orgs/org/repos"
    sess = DummySession({
        (url, 1): DummyResponse(200, repos("a", 2)),
        (url, 2): DummyResponse(200, repos("b", 1)),
    })
    client = GitHubClient(session=sess)
    result = client.list_org_repos("org", per_page=2)
    assert [r["name"] for r in result] == ["a0", "a1", "b0"]
    assert sess.calls == [(url, 1), (url, 2)]


def test_list_org_repos_stops_on_empty_page():
    url = f"{API}/orgs/org/repos"
    sess = DummySession({
        (url, 1): DummyResponse(200, repos("a", 2)),
        (url, 2): DummyResponse(200, []),
    })
    client = GitHubClient(session=sess)
    assert len(client.list_org_repos("org", per_page=2)) == 2
    assert len(sess.calls) == 2


def test_list_org_repos_propagates_http_error():
    sess = DummySession({(f"{API}/orgs/org/repos", 1): DummyResponse(500, [])})
    client = GitHubClient(session=sess)
    with pytest.raises(GitHubError) as exc:
        client.list_org_repos("org")
    assert exc.value.status_code == 500


def test_list_org_repos_rejects_non_list_body():
    sess = DummySession({(f"{API}/orgs/org/repos", 1): DummyResponse(200, {"message": "odd"})})
    client = GitHubClient(session=sess)
    with pytest.raises(GitHubParseError):
        client.list_org_repos("org")


@pytest.mark.parametrize("status, expected", [(404, 404), (401, 401), (403, 429), (502, 502)])
def test_error_status_mapping(status, expected):
    sess = DummySession({(f"{API}/repos/org/x/topics", None): DummyResponse(status, {})})
    client = GitHubClient(session=sess)
    with pytest.raises(GitHubError) as exc:
        client.get_topics("org", "x")
    assert exc.value.status_code == expected


def test_accepts_any_2xx_status():
    sess = DummySession({(f"{API}/repos/org/x/topics", None): DummyResponse(203, {"names": ["t"]})})
    assert GitHubClient(session=sess).get_topics("org", "x") == ["t"]


def test_malformed_json_raises_parse_error():
    sess = DummySession({(f"{API}/repos/org/x/topics", None): DummyResponse(200)})
    client = GitHubClient(session=sess)
    with pytest.raises(GitHubParseError):
        client.get_topics("org", "x")


def test_network_failure_becomes_github_error():
    client = GitHubClient(session=FailingSession({}))
    with pytest.raises(GitHubError) as exc:
        client.get_json("/orgs/org/repos")
    assert exc.value.status_code == 0


def test_get_topics_missing_names():
    sess = DummySession({(f"{API}/repos/org/x/topics", None): DummyResponse(200, {})})
    assert GitHubClient(session=sess).get_topics("org", "x") == []


def test_get_readme_decodes_base64_with_line_breaks():
    encoded = base64.b64encode("# Título\nDescription: hi\n".encode("utf-8")).decode("ascii")
    wrapped = encoded[:10] + "\n" + encoded[10:]
    sess = DummySession({(f"{API}/repos/org/x/readme", None): DummyResponse(200, {"content": wrapped})})
    assert GitHubClient(session=sess).get_readme("org", "x") == "# Título\nDescription: hi\n"


def test_get_readme_without_content():
    sess = DummySession({(f"{API}/repos/org/x/readme", None): DummyResponse(200, {"encoding": "base64"})})
    assert GitHubClient(session=sess).get_readme("org", "x") == ""


def test_get_readme_replaces_undecodable_bytes():
    encoded = base64.b64encode(b"# T\xff\n").decode("ascii")
    sess = DummySession({(f"{API}/repos/org/x/readme", None): DummyResponse(200, {"content": encoded})})
    text = GitHubClient(session=sess).get_readme("org", "x")
    assert text == "# T\ufffd\n"


def test_get_readme_rejects_invalid_base64():
    sess = DummySession({(f"{API}/repos/org/x/readme", None): DummyResponse(200, {"content": "abcde"})})
    with pytest.raises(GitHubParseError):
        GitHubClient(session=sess).get_readme("org", "x")
