"""Shared fixtures: a fake requests session and isolated settings"""
from typing import Any, Dict, List, Optional
from urllib.parse import urlencode

import pytest
import requests

from spotify_readme.config import Settings


class FakeResponse:
    """Minimal stand-in for requests.Response"""

    def __init__(self, status_code: int = 200, json_body: Any = None, text: Optional[str] = None):
        self.status_code = status_code
        self._json_body = json_body
        self.text = text if text is not None else ("" if json_body is None else str(json_body))

    def raise_for_status(self) -> None:
        if self.status_code >= 400:
            raise requests.exceptions.HTTPError(f"{self.status_code} Error", response=self)

    def json(self) -> Any:
        if self._json_body is None:
            raise ValueError("No JSON body")
        return self._json_body


class FakeSession:
    """
    Replays canned responses for matching requests and records every call.

    A route matches when its method is equal and its fragment occurs in the
    request URL including the encoded query string. Routes are tried in
    the order they were added.
    """

    def __init__(self) -> None:
        self.headers: Dict[str, str] = {}
        self.calls: List[Dict[str, Any]] = []
        self._routes: List[tuple] = []
        self.closed = False

    def __enter__(self):
        return self

    def __exit__(self, *exc_info):
        self.close()

    def close(self) -> None:
        self.closed = True

    def add(self, method: str, fragment: str, response: Any) -> None:
        """Register a FakeResponse or an exception instance to raise"""
        self._routes.append((method.upper(), fragment, response))

    def add_json(self, method: str, fragment: str, body: Any, status_code: int = 200) -> None:
        self.add(method, fragment, FakeResponse(status_code, json_body=body))

    def add_text(self, method: str, fragment: str, text: str, status_code: int = 200) -> None:
        self.add(method, fragment, FakeResponse(status_code, text=text))

    def get(self, url, params=None, headers=None, timeout=None):
        return self._dispatch('GET', url, params=params, headers=headers, timeout=timeout)

    def post(self, url, data=None, headers=None, timeout=None):
        return self._dispatch('POST', url, data=data, headers=headers, timeout=timeout)

    def calls_to(self, fragment: str) -> List[Dict[str, Any]]:
        return [c for c in self.calls if fragment in c['full_url']]

    def _dispatch(self, method, url, params=None, data=None, headers=None, timeout=None):
        full_url = url + ('?' + urlencode(params) if params else '')
        merged_headers = dict(self.headers)
        merged_headers.update(headers or {})
        self.calls.append({
            'method': method, 'url': url, 'full_url': full_url, 'params': params,
            'data': data, 'headers': merged_headers, 'timeout': timeout,
        })
        for route_method, fragment, response in self._routes:
            if route_method == method and fragment in full_url:
                if isinstance(response, Exception):
                    raise response
                return response
        raise requests.exceptions.ConnectionError(f"No fake route for {method} {full_url}")


@pytest.fixture
def fake_session() -> FakeSession:
    return FakeSession()


@pytest.fixture
def settings(tmp_path) -> Settings:
    return Settings(
        _env_file=None,
        SPOTIFY_CLIENT_ID="client-id",
        SPOTIFY_CLIENT_SECRET="client-secret",
        SPOTIFY_CODE="auth-code",
        AUTH_CACHE_FILE=str(tmp_path / "spotify-auth.json"),
        OUTPUT_FILE=str(tmp_path / "readme.md"),
    )


def make_track(name: str, link: str, artist_id: str, artist_name: str = "Artist",
               artist_link: str = "https://open.spotify.com/artist/x") -> Dict[str, Any]:
    """Track object shaped like the top tracks endpoint returns it"""
    return {
        'name': name,
        'external_urls': {'spotify': link},
        'album': {
            'artists': [{
                'id': artist_id,
                'name': artist_name,
                'external_urls': {'spotify': artist_link},
            }]
        },
    }


def make_play(track: Dict[str, Any]) -> Dict[str, Any]:
    """Play history object shaped like the recently played endpoint returns it"""
    return {'track': track, 'played_at': '2024-01-01T12:00:00.000Z'}


@pytest.fixture
def track():
    return make_track


@pytest.fixture
def play():
    return make_play
