"""Domain models for the listening summary"""
from dataclasses import dataclass
from typing import Any, Dict, List, Optional

from spotify_readme.errors import DataFetchError, StatsUnavailableError

@dataclass
class TrackSummary:
    """Most played track with links to the song and its artist"""
    artist_name: str
    artist_link: str
    song_name: str
    song_link: str

    @classmethod
    def from_track(cls, track: Dict[str, Any]) -> "TrackSummary":
        """Build from a Spotify track object, using the album's first artist"""
        try:
            artist = track['album']['artists'][0]
            return cls(
                artist_name=artist['name'],
                artist_link=artist['external_urls']['spotify'],
                song_name=track['name'],
                song_link=track['external_urls']['spotify'],
            )
        except (KeyError, IndexError, TypeError) as e:
            raise DataFetchError(f"Track object is missing field {e}") from e

@dataclass
class ListeningSummary:
    """Everything the rendered document needs"""
    top_track: Optional[TrackSummary] = None
    long_term_genre: Optional[str] = None
    recent_genre: Optional[str] = None

    def missing_fields(self) -> List[str]:
        return [name for name in ('top_track', 'long_term_genre', 'recent_genre')
                if getattr(self, name) is None]

    def require_complete(self) -> None:
        """Raise StatsUnavailableError unless every field was collected"""
        missing = self.missing_fields()
        if missing:
            raise StatsUnavailableError(missing)
