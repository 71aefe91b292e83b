"""Listening stats collection"""
import logging
from typing import Optional

from spotify_readme.errors import DataFetchError
from spotify_readme.genres import collect_genres, most_common_genre
from spotify_readme.models.stats import ListeningSummary, TrackSummary
from spotify_readme.services.spotify import SpotifyAPI

logger = logging.getLogger(__name__)

TOP_TRACK_RANGE = 'short_term'
LONG_TERM_RANGE = 'long_term'
HISTORY_LIMIT = 50

class StatsCollector:
    """Derives the listening summary from three independent reads"""

    def __init__(self, api: SpotifyAPI):
        self.api = api

    def collect(self) -> ListeningSummary:
        """
        Collect the summary.

        Each read fails on its own: the error is logged and the matching
        field stays None.
        """
        summary = ListeningSummary(
            top_track=self.top_track(),
            long_term_genre=self.long_term_genre(),
            recent_genre=self.recent_genre(),
        )
        logger.info(f"Collected listening summary: {summary}")
        return summary

    def top_track(self) -> Optional[TrackSummary]:
        """Most played track over the last weeks"""
        try:
            items = self.api.get_top_tracks(time_range=TOP_TRACK_RANGE, limit=1)
            if not items:
                raise DataFetchError("No top track returned")
            return TrackSummary.from_track(items[0])
        except DataFetchError as e:
            logger.error(f"Failed to fetch top track: {e}")
            return None

    def long_term_genre(self) -> Optional[str]:
        """Most common genre among the long-term top tracks"""
        try:
            items = self.api.get_top_tracks(time_range=LONG_TERM_RANGE, limit=HISTORY_LIMIT)
        except DataFetchError as e:
            logger.error(f"Failed to fetch long-term top tracks: {e}")
            return None
        return most_common_genre(collect_genres(self.api, items))

    def recent_genre(self) -> Optional[str]:
        """Most common genre among the recently played tracks"""
        try:
            items = self.api.get_recently_played(limit=HISTORY_LIMIT)
        except DataFetchError as e:
            logger.error(f"Failed to fetch recently played tracks: {e}")
            return None
        return most_common_genre(collect_genres(self.api, items))
