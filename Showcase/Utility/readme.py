"""README scanning for a display title and a one-line blurb."""
import re
from typing import Tuple

HEADING_MARKER = "#"
BLURB_MARKER = "Description:"

_HEADING_PREFIX = re.compile(r"^#+\s*")
_LINE_BREAK = re.compile(r"\r?\n")


def extract_title_and_blurb(readme: str) -> Tuple[str, str]:
    """Return (title, blurb) from the first heading and `Description:` lines.

    Either value is "" when the README lacks it.
    """
    title = ""
    blurb = ""
    if not readme:
        return title, blurb
    for line in _LINE_BREAK.split(readme):
        if not title and line.startswith(HEADING_MARKER):
            title = _HEADING_PREFIX.sub("", line).strip()
        if not blurb and line.startswith(BLURB_MARKER):
            blurb = line[len(BLURB_MARKER):].strip()
        if title and blurb:
            break
    return title, blurb
