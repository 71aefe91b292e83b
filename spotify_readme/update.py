"""Main update logic: authenticate, collect stats, render the document"""
import logging
from contextlib import nullcontext
from typing import Optional

import requests

from spotify_readme.config import Settings
from spotify_readme.render import render_readme, write_readme
from spotify_readme.services.auth import TokenProvider
from spotify_readme.services.credentials import CredentialStore
from spotify_readme.services.spotify import SpotifyAPI
from spotify_readme.stats import StatsCollector

logger = logging.getLogger(__name__)

class ReadmeUpdater:
    """Runs one update of the generated document"""

    def __init__(self, settings: Settings, session: Optional[requests.Session] = None):
        """
        Initialize the update with settings and an optional shared HTTP session.

        A session passed in stays open after run(); otherwise run() opens
        its own and closes it when done.
        """
        self.settings = settings
        self.session = session
        self.store = CredentialStore(settings.AUTH_CACHE_FILE)

    def run(self) -> str:
        """
        Update the document and return its path.

        Raises:
            StatsUnavailableError: If any stat could not be collected. The
                previous document is left untouched in that case.
        """
        session_scope = nullcontext(self.session) if self.session is not None else requests.Session()
        with session_scope as session:
            token = TokenProvider(settings=self.settings, store=self.store, session=session).get_token()

            spotify = SpotifyAPI(
                token=token,
                base_url=self.settings.SPOTIFY_API_URL,
                timeout=self.settings.REQUEST_TIMEOUT,
                session=session
            )
            summary = StatsCollector(spotify).collect()
        summary.require_complete()

        content = render_readme(
            track=summary.top_track,
            long_term_genre=summary.long_term_genre,
            recent_genre=summary.recent_genre,
            profile_url=self.settings.PROFILE_URL,
            search_url=self.settings.SEARCH_URL,
            about_url=self.settings.ABOUT_URL
        )
        write_readme(self.settings.OUTPUT_FILE, content)
        logger.info(f"Update complete: {self.settings.OUTPUT_FILE}")
        return self.settings.OUTPUT_FILE
