"""
CSV record -> song document normalization.

Pure functions only (no I/O), so the seeding pipeline and the tests share
exactly the same mapping.

Genre values in the source dataset arrive in several shapes:
- a native list (["pop", "rock"])
- a JSON-ish list string ("['pop', 'rock']", single quotes, trailing commas)
- an empty / "[]" / malformed string

`extract_genre` decodes them in a fixed order and always falls back to
the "none" sentinel instead of raising.
"""

from __future__ import annotations

import enum
import math
from typing import Any
from urllib.parse import quote

import json5

NO_GENRE = "none"

EMBED_TEMPLATE = (
    '<iframe src="https://open.spotify.com/embed/track/{track_id}" '
    'width="300" height="380" frameborder="0" allowtransparency="true" '
    'allow="encrypted-media"></iframe>'
)

# Characters encodeURIComponent leaves untouched (besides alphanumerics).
_URI_COMPONENT_SAFE = "-_.!~*'()"

RawRecord = dict[str, str]


class GenreShape(enum.Enum):
    ABSENT = "absent"
    SEQUENCE = "sequence"
    TEXT = "text"


def classify_genre_value(value: Any) -> GenreShape:
    if value is None or value == "":
        return GenreShape.ABSENT
    if isinstance(value, (list, tuple)):
        return GenreShape.SEQUENCE
    return GenreShape.TEXT


def _stringify(value: Any, *, nested: bool = False) -> str:
    """
    Render a parsed genre element the way a JavaScript `String(x)` would.

    Nested lists join with "," (null items become ""), integral floats drop
    the ".0", objects become "[object Object]".
    """
    if value is None:
        return "" if nested else "null"
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        if math.isnan(value):
            return "NaN"
        if math.isinf(value):
            return "Infinity" if value > 0 else "-Infinity"
        if value.is_integer():
            return str(int(value))
        return repr(value)
    if isinstance(value, (list, tuple)):
        return ",".join(_stringify(item, nested=True) for item in value)
    if isinstance(value, dict):
        return "[object Object]"
    return str(value)


def _first_genre(items: list | tuple) -> str:
    if not items:
        return NO_GENRE
    genre = _stringify(items[0]).strip()
    return genre or NO_GENRE


def _parse_relaxed_json(text: str) -> Any:
    """
    Parse `text` as JSON5. Returns None when it is not parseable.
    """
    try:
        return json5.loads(text)
    except (ValueError, RecursionError):
        return None


def extract_genre(value: Any) -> str:
    """
    Pick one representative genre out of an `artist_genres` cell.
    """
    shape = classify_genre_value(value)

    if shape is GenreShape.ABSENT:
        return NO_GENRE

    if shape is GenreShape.SEQUENCE:
        return _first_genre(value)

    text = str(value).strip()
    if not text or text == "[]":
        return NO_GENRE

    parsed = _parse_relaxed_json(text)
    if isinstance(parsed, list):
        return _first_genre(parsed)
    return NO_GENRE


def build_embed(track_id: Any) -> str:
    if track_id is None:
        return ""
    track_id = str(track_id).strip()
    if not track_id:
        return ""
    return EMBED_TEMPLATE.format(track_id=quote(track_id, safe=_URI_COMPONENT_SAFE))


def coerce_duration(value: Any) -> Any:
    """
    Permissive numeric coercion for `track_duration_ms`.

    Blank -> None, "215000" -> 215000, "215000.5" -> 215000.5.
    Anything else is returned unchanged; document validation rejects it.
    """
    if value is None:
        return None
    if isinstance(value, (int, float)) and not isinstance(value, bool):
        return value

    text = str(value).strip()
    if not text:
        return None
    try:
        return int(text)
    except ValueError:
        pass
    try:
        return float(text)
    except ValueError:
        return value


def normalize(record: RawRecord) -> dict[str, Any]:
    track_id = record.get("track_id")
    return {
        "track_name": record.get("track_name"),
        "artist_name": record.get("artist_name"),
        "track_duration_ms": coerce_duration(record.get("track_duration_ms")),
        "track_id": track_id,
        "embed": build_embed(track_id),
        "artist_genre": extract_genre(record.get("artist_genres")),
    }


def is_persistable(song: dict[str, Any]) -> bool:
    return bool(song.get("track_name")) and bool(song.get("artist_name")) and song.get("artist_genre") != NO_GENRE
