"""Genre aggregation over listened tracks"""
import logging
from collections import Counter
from typing import Any, Dict, Iterable, List, Optional

from spotify_readme.errors import DataFetchError

logger = logging.getLogger(__name__)

def resolve_artist_id(item: Dict[str, Any]) -> str:
    """
    First album artist of a listened item.

    Top tracks carry the album directly, recently played entries wrap the
    track in a play history object, so the album sits under 'track'.
    """
    try:
        album = item['album'] if 'album' in item else item['track']['album']
        artist_id = album['artists'][0]['id']
    except (KeyError, IndexError, TypeError) as e:
        raise DataFetchError(f"Cannot resolve artist id of item: missing {e}") from e
    if not artist_id:
        raise DataFetchError("Artist id is empty")
    return artist_id

def collect_genres(api, items: Iterable[Dict[str, Any]]) -> List[str]:
    """Flatten the genre tags of each item's artist into one list"""
    genres: List[str] = []
    for item in items:
        try:
            artist_id = resolve_artist_id(item)
            artist_genres = api.get_artist_genres(artist_id)
        except DataFetchError as e:
            logger.warning(f"Skipping item without artist genres: {e}")
            continue
        genres.extend(artist_genres)
    logger.info(f"Collected {len(genres)} genre tags")
    return genres

def most_common_genre(genres: Iterable[str]) -> Optional[str]:
    """
    Most frequent genre, or None when there are none.

    Ties go to the genre that appears first in the input.
    """
    counts = Counter(genres)
    if not counts:
        return None
    return counts.most_common(1)[0][0]
