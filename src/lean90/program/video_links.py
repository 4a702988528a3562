"""Form-check video links. Pure string building, no network access."""

from __future__ import annotations

from urllib.parse import quote

from lean90.models.enums import VIDEO_SEARCH_BASE_URL, VIDEO_SEARCH_SUFFIX


def video_search_url(exercise_name: str) -> str:
    """Search URL for "<exercise_name> proper form".

    Every reserved character is percent-encoded and spaces become ``%20``,
    so names like "Close-grip Bench / Dips" stay a single query value.
    """
    query = f"{exercise_name.strip()} {VIDEO_SEARCH_SUFFIX}"
    return VIDEO_SEARCH_BASE_URL + quote(query, safe="")
