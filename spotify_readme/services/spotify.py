"""Spotify API integration service"""
import logging
from typing import Any, Dict, List, Optional

import requests

from spotify_readme.errors import DataFetchError

logger = logging.getLogger(__name__)

# Spotify caps page sizes at 50
MAX_PAGE_SIZE = 50


class SpotifyAPI:
    """Read-only access to the listening history endpoints"""

    def __init__(self, token: Optional[str], base_url: str = "https://api.spotify.com/v1",
                 timeout: float = 15, session: Optional[requests.Session] = None):
        """
        Initialize with Spotify access token.

        A missing token is not rejected here: requests are sent without
        authorization and fail with a DataFetchError like any other call.
        """
        self.base_url = base_url.rstrip('/')
        self.timeout = timeout
        self.session = session or requests.Session()
        self.session.headers.update({'Accept': 'application/json'})
        if token:
            self.session.headers['Authorization'] = f'Bearer {token}'
        else:
            # A shared session may still carry the token of an earlier run
            self.session.headers.pop('Authorization', None)
            logger.warning("No Spotify access token available, API requests will be unauthenticated")

    def get_top_tracks(self, time_range: str = 'short_term', limit: int = MAX_PAGE_SIZE) -> List[Dict]:
        """
        Get user's top tracks

        Args:
            time_range: short_term (4 weeks), medium_term (6 months), or long_term (years)
            limit: Number of tracks to fetch (Spotify API max is 50).
        """
        actual_limit = min(limit, MAX_PAGE_SIZE)
        logger.info(f"Fetching top tracks (range: {time_range}, limit: {actual_limit})...")
        response_data = self._make_request('me/top/tracks', {'time_range': time_range, 'limit': actual_limit})
        return self._items(response_data, f"top tracks ({time_range})")

    def get_recently_played(self, limit: int = MAX_PAGE_SIZE) -> List[Dict]:
        """Get the most recently played tracks, each wrapped in a play history object"""
        actual_limit = min(limit, MAX_PAGE_SIZE)
        logger.info(f"Fetching recently played tracks (limit: {actual_limit})...")
        response_data = self._make_request('me/player/recently-played', {'limit': actual_limit})
        return self._items(response_data, "recently played")

    def get_artist_genres(self, artist_id: str) -> List[str]:
        """Genre tags of an artist; an artist without tags yields an empty list"""
        response_data = self._make_request(f'artists/{artist_id}')
        genres = response_data.get('genres')
        if not isinstance(genres, list):
            logger.debug(f"Artist {artist_id} has no genres")
            return []
        return [g for g in genres if isinstance(g, str)]

    def _items(self, response_data: Dict[str, Any], label: str) -> List[Dict]:
        items = response_data.get('items')
        if not isinstance(items, list):
            raise DataFetchError(f"Unexpected response format for {label}: {response_data}")
        return items

    def _make_request(self, endpoint: str, params: Optional[Dict[str, Any]] = None) -> Dict[str, Any]:
        """Make an authenticated GET request and return the decoded JSON object"""
        url = f'{self.base_url}/{endpoint}'
        try:
            logger.debug(f"Making request to {url} with params {params}")
            response = self.session.get(url, params=params, timeout=self.timeout)
            response.raise_for_status()
        except requests.exceptions.HTTPError as e:
            status = e.response.status_code if e.response is not None else None
            if status == 401:
                logger.error(f"Spotify token is invalid or expired (401) for {url}.")
            elif status == 403:
                logger.error(f"Forbidden access (403) to Spotify endpoint {url}. Check scopes/permissions.")
            raise DataFetchError(f"HTTP error for {url}: {e}") from e
        except requests.exceptions.RequestException as e:
            raise DataFetchError(f"Request error for {url}: {e}") from e

        try:
            json_response = response.json()
        except ValueError as e:
            raise DataFetchError(f"Failed to decode JSON response from {url}. Response text: {response.text[:200]}") from e
        if not isinstance(json_response, dict):
            raise DataFetchError(f"Expected a JSON object from {url}, got {type(json_response).__name__}")
        logger.debug(f"Request successful (Status: {response.status_code}) to {url}")
        return json_response
