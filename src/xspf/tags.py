"""
Audio tag reading for track fields.

Reads title and artist from MP3/M4A/FLAC/OGG files through mutagen's
"easy" tag interface so tracks can be filled from the files they point at.
"""

import logging
from pathlib import Path
from typing import Dict, Optional, Union

import mutagen

from .errors import TagReadError

logger = logging.getLogger(__name__)

# Easy-tag key -> track field
TAG_FIELDS = {
    "title": "title",
    "artist": "creator",
}


def _first_value(values, max_length: Optional[int]) -> Optional[str]:
    """Return the first non-empty tag value, truncated to max_length."""
    if not values:
        return None
    if isinstance(values, str):
        values = [values]
    for value in values:
        value = str(value).strip()
        if value:
            return value[:max_length] if max_length else value
    return None


def read_tags(
    path: Union[str, Path],
    max_field_length: Optional[int] = None,
) -> Dict[str, Optional[str]]:
    """
    Read title and creator from an audio file's tags.

    Args:
        path: Path to audio file.
        max_field_length: Truncate values to this many characters (None = no limit).

    Returns:
        {"title": str|None, "creator": str|None}. Files mutagen does not
        recognise, or that carry no tags, give None for both.

    Raises:
        TagReadError: If the file does not exist.
    """
    path = Path(path)
    result: Dict[str, Optional[str]] = {field: None for field in TAG_FIELDS.values()}

    if not path.is_file():
        raise TagReadError(f"Audio file not found: {path}")

    try:
        audio = mutagen.File(str(path), easy=True)
    except mutagen.MutagenError as e:
        logger.warning(f"Could not read tags from {path}: {e}")
        return result

    if audio is None or audio.tags is None:
        logger.debug(f"No readable tags in {path.name}")
        return result

    for tag_key, field_name in TAG_FIELDS.items():
        result[field_name] = _first_value(audio.tags.get(tag_key), max_field_length)

    logger.debug(f"Read tags from {path.name}: {result}")
    return result
