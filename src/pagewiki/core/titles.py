"""Request path validation.

The path pattern is the only input sanitization in the server: restricting
titles to ASCII letters and digits keeps derived file names inside the data
directory.
"""

import re
from dataclasses import dataclass

VALID_PATH = re.compile(r"/(view|edit|save)/([A-Za-z0-9]+)")


@dataclass(frozen=True)
class TitleMatch:
    """Action and title extracted from a valid request path."""

    action: str
    title: str


def match_path(path: str) -> TitleMatch | None:
    """Match a request path against the page route pattern.

    Args:
        path: URL path, e.g. "/view/FrontPage"

    Returns:
        TitleMatch for a valid path, None otherwise
    """
    m = VALID_PATH.fullmatch(path)
    if m is None:
        return None
    return TitleMatch(action=m.group(1), title=m.group(2))
