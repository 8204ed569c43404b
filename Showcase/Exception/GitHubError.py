"""GitHub API error classes."""


class GitHubError(Exception):

    def __init__(self, message: str, status_code: int):
        self.message = message
        self.status_code = status_code
        super().__init__(self.message)


"""Raised when a GitHub API response body is not the JSON shape expected."""
class GitHubParseError(GitHubError):
    def __init__(self, message: str = "Malformed JSON response", status_code: int = 200):
        super().__init__(message, status_code)
