"""Spotify token acquisition"""
import base64
import logging
from typing import Any, Dict, Optional

import requests

from spotify_readme.config import Settings
from spotify_readme.errors import AuthExchangeError
from spotify_readme.models.credentials import CredentialRecord
from spotify_readme.services.credentials import CredentialStore

logger = logging.getLogger(__name__)

def basic_auth_header(client_id: Optional[str], client_secret: Optional[str]) -> str:
    """Authorization header value for the token endpoint"""
    raw = f"{client_id or ''}:{client_secret or ''}".encode('utf-8')
    return 'Basic ' + base64.b64encode(raw).decode('ascii')

class TokenProvider:
    """Hands out an access token, refreshing it through the token endpoint"""

    def __init__(self, settings: Settings, store: CredentialStore, session: Optional[requests.Session] = None):
        self.settings = settings
        self.store = store
        self.session = session or requests.Session()

    def build_token_request(self, record: CredentialRecord) -> Dict[str, str]:
        """
        Form body for the token endpoint.

        Uses the refresh grant when a refresh token is cached, otherwise
        exchanges the configured authorization code.
        """
        if record.refresh_token:
            return {
                'grant_type': 'refresh_token',
                'refresh_token': record.refresh_token,
            }
        if not self.settings.SPOTIFY_CODE:
            logger.warning("No cached refresh token and SPOTIFY_CODE is not set; the code exchange will fail")
        return {
            'grant_type': 'authorization_code',
            'code': self.settings.SPOTIFY_CODE or '',
            'redirect_uri': self.settings.SPOTIFY_REDIRECT_URI,
        }

    def get_token(self) -> Optional[str]:
        """
        Get an access token for this run.

        A failed exchange is logged and the cached access token (which may be
        stale or None) is returned instead; API calls made with it fail on
        their own. The cache is written back after every attempt.
        """
        record = self.store.load()
        form_data = self.build_token_request(record)
        logger.info(f"Requesting access token (grant_type: {form_data['grant_type']})")

        try:
            payload = self._exchange(form_data)
        except AuthExchangeError as e:
            logger.error(f"Token exchange failed: {e}")
        else:
            record.access_token = payload['access_token']
            # Refresh tokens are not always re-issued; keep the cached one otherwise
            if payload.get('refresh_token'):
                record.refresh_token = payload['refresh_token']
            logger.info("Access token obtained")

        self.store.save(record)
        return record.access_token

    def _exchange(self, form_data: Dict[str, str]) -> Dict[str, Any]:
        """POST the form to the token endpoint and return the JSON body"""
        headers = {
            'Content-Type': 'application/x-www-form-urlencoded',
            'Authorization': basic_auth_header(self.settings.SPOTIFY_CLIENT_ID, self.settings.SPOTIFY_CLIENT_SECRET),
        }
        try:
            response = self.session.post(
                self.settings.SPOTIFY_TOKEN_URL,
                data=form_data,
                headers=headers,
                timeout=self.settings.REQUEST_TIMEOUT
            )
            response.raise_for_status()
        except requests.exceptions.RequestException as e:
            raise AuthExchangeError(str(e)) from e

        try:
            payload = response.json()
        except ValueError as e:
            raise AuthExchangeError(f"Token endpoint returned invalid JSON: {response.text[:200]}") from e

        if not isinstance(payload, dict) or not payload.get('access_token'):
            raise AuthExchangeError(f"Token response has no access_token: {payload}")
        return payload
