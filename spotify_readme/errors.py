"""Exceptions raised while building the listening summary"""
from typing import Iterable


class SpotifyReadmeError(Exception):
    """Base class for all errors of this package"""


class AuthExchangeError(SpotifyReadmeError):
    """The token endpoint did not hand out a usable access token"""


class DataFetchError(SpotifyReadmeError):
    """A read endpoint failed or returned an unexpected body"""


class StatsUnavailableError(SpotifyReadmeError):
    """Raised before rendering when a derived stat could not be collected"""

    def __init__(self, missing: Iterable[str]):
        self.missing = list(missing)
        super().__init__(f"Listening stats incomplete, missing: {', '.join(self.missing)}")
