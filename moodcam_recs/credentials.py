"""
Spotify Credential Cache
========================

Holds the bearer token for the Spotify Web API client-credentials flow and
refreshes it only once it has expired.
"""

import os
import time
import logging
import threading
from dataclasses import dataclass
from typing import Callable, Optional

import requests

from .config import (
    SPOTIFY_CLIENT_ID,
    SPOTIFY_CLIENT_SECRET,
    SPOTIFY_TOKEN_URL,
    HTTP_TIMEOUT_SECONDS,
)
from .errors import AuthenticationFailure

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Credential:
    """Bearer token and the instant (epoch seconds) it stops being usable."""
    token: str
    expires_at: float

    def is_valid(self, now: float) -> bool:
        return now < self.expires_at


class CredentialCache:
    """
    Client-credentials token holder.

    A held credential is returned as-is until it expires. On a miss a single
    token exchange is made; concurrent callers wait on the refresh lock and
    then reuse its result.

    Attributes:
        client_id: Spotify application client ID
        client_secret: Spotify application client secret
        token_url: Identity endpoint for the exchange
    """

    def __init__(
        self,
        client_id: Optional[str] = None,
        client_secret: Optional[str] = None,
        token_url: str = SPOTIFY_TOKEN_URL,
        session: Optional[requests.Session] = None,
        clock: Callable[[], float] = time.time,
        timeout: float = HTTP_TIMEOUT_SECONDS,
    ):
        """
        Initialize the cache.

        Args:
            client_id: Client ID (read from the environment if None)
            client_secret: Client secret (read from the environment if None)
            token_url: Token endpoint URL
            session: HTTP session used for the exchange
            clock: Returns the current time in epoch seconds
            timeout: Exchange timeout in seconds
        """
        # Get credentials from environment at runtime (not import time)
        self.client_id = (
            client_id
            or os.environ.get("SPOTIFY_CLIENT_ID")
            or os.environ.get("SPOTIPY_CLIENT_ID")
            or SPOTIFY_CLIENT_ID
        )
        self.client_secret = (
            client_secret
            or os.environ.get("SPOTIFY_CLIENT_SECRET")
            or os.environ.get("SPOTIPY_CLIENT_SECRET")
            or SPOTIFY_CLIENT_SECRET
        )
        self.token_url = token_url
        self.session = session or requests.Session()
        self.timeout = timeout
        self._clock = clock
        self._credential: Optional[Credential] = None
        self._refresh_lock = threading.Lock()

    @property
    def credential(self) -> Optional[Credential]:
        """Currently held credential, possibly expired."""
        return self._credential

    def get_token(self) -> Credential:
        """
        Return a usable credential, exchanging for a new one if needed.

        Returns:
            Unexpired Credential

        Raises:
            AuthenticationFailure: If the exchange fails
        """
        held = self._credential
        if held is not None and held.is_valid(self._clock()):
            return held

        with self._refresh_lock:
            # Another caller may have refreshed while we waited
            held = self._credential
            if held is not None and held.is_valid(self._clock()):
                return held

            self._credential = self._exchange()
            return self._credential

    def get_access_token(self, as_dict: bool = False):
        """
        Spotipy auth-manager hook.

        Lets the cache be passed to ``spotipy.Spotify(auth_manager=...)`` so
        every API call is authorized through get_token.
        """
        credential = self.get_token()
        if as_dict:
            return {"access_token": credential.token, "expires_at": credential.expires_at}
        return credential.token

    def invalidate(self) -> None:
        """Drop the held credential so the next call refreshes."""
        self._credential = None

    def _exchange(self) -> Credential:
        """Perform the client-credentials grant."""
        if not self.client_id or not self.client_secret:
            raise AuthenticationFailure(
                "Failed to authenticate with Spotify",
                details="Spotify client credentials are not configured",
            )

        requested_at = self._clock()
        try:
            response = self.session.post(
                self.token_url,
                data={"grant_type": "client_credentials"},
                auth=(self.client_id, self.client_secret),
                timeout=self.timeout,
            )
        except requests.RequestException as e:
            logger.error("Error getting Spotify token: %s", e)
            raise AuthenticationFailure(
                "Failed to authenticate with Spotify", details=str(e)
            ) from e

        if not response.ok:
            details = _response_body(response)
            logger.error("Error getting Spotify token: %s", details)
            raise AuthenticationFailure(
                "Failed to authenticate with Spotify",
                status=response.status_code,
                details=details,
            )

        payload = _response_body(response)
        token = payload.get("access_token") if isinstance(payload, dict) else None
        if not token:
            logger.error("Spotify token response had no access_token: %s", payload)
            raise AuthenticationFailure(
                "Failed to authenticate with Spotify",
                status=response.status_code,
                details=payload,
            )

        expires_in = float(payload.get("expires_in") or 0)
        logger.debug("Refreshed Spotify token, valid for %.0fs", expires_in)
        return Credential(token=token, expires_at=requested_at + expires_in)


def _response_body(response: requests.Response):
    """Decoded JSON body, or the raw text if it is not JSON."""
    try:
        return response.json()
    except ValueError:
        return response.text
