"""Authentication helpers"""
import os
from typing import Optional


def get_github_token() -> Optional[str]:
    return os.environ.get("GITHUB_TOKEN") or os.environ.get("GH_TOKEN")


def mask_token(token: Optional[str]) -> str:
    if not token:
        return "<none>"
    return token[:4] + "…" if len(token) > 8 else "****"
