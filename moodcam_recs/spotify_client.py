"""
Spotify API Client Wrapper
==========================

Handles the catalog side of MoodCam Recs:
- Authorization through the shared CredentialCache
- Track search
- Mapping raw search items to Track records
"""

import logging
from dataclasses import dataclass, asdict
from typing import List, Dict, Optional, Any

import requests
import spotipy

from .config import DEFAULT_SEARCH_CONFIG, HTTP_TIMEOUT_SECONDS, SearchConfig
from .credentials import CredentialCache
from .errors import SearchFailure
from .utils import join_artist_names, first_image_url

logger = logging.getLogger(__name__)


@dataclass
class Track:
    """Single catalog track as returned to the browser."""
    id: str
    name: str
    artist: str
    album: str
    image: str
    preview_url: Optional[str]
    external_url: Optional[str]
    duration_ms: int

    @classmethod
    def from_spotify(cls, item: Dict[str, Any]) -> "Track":
        """Build a Track from a raw Spotify track object."""
        album = item.get("album") or {}
        return cls(
            id=item.get("id"),
            name=item.get("name"),
            artist=join_artist_names(item.get("artists", [])),
            album=album.get("name"),
            image=first_image_url(album.get("images", [])),
            preview_url=item.get("preview_url"),
            external_url=(item.get("external_urls") or {}).get("spotify"),
            duration_ms=item.get("duration_ms") or 0,
        )

    def to_dict(self) -> Dict[str, Any]:
        return asdict(self)


class SpotifyClient:
    """
    Wrapper around Spotipy for mood-driven track search.

    Attributes:
        credentials: Token cache authorizing every request
        sp: Spotipy client instance
        config: Search settings
    """

    def __init__(
        self,
        credentials: Optional[CredentialCache] = None,
        config: SearchConfig = DEFAULT_SEARCH_CONFIG,
        timeout: float = HTTP_TIMEOUT_SECONDS,
        session: Optional[requests.Session] = None,
    ):
        """
        Initialize Spotify client.

        Args:
            credentials: Credential cache (a new one is created if None)
            config: Search configuration
            timeout: Request timeout in seconds
            session: HTTP session for API calls
        """
        self.credentials = credentials or CredentialCache()
        self.config = config

        # A plain session has no urllib3 Retry adapter, so 429/5xx responses
        # reach spotipy's HTTPError branch with their real status and message
        self.sp = spotipy.Spotify(
            auth_manager=self.credentials,
            requests_session=session or requests.Session(),
            requests_timeout=timeout,
        )

    def search_tracks(self, query: str, limit: Optional[int] = None) -> List[Track]:
        """
        Search tracks for a query, single page only.

        Args:
            query: Search phrase
            limit: Maximum tracks to return (defaults to config.limit)

        Returns:
            List of Track records in catalog order

        Raises:
            AuthenticationFailure: If no token could be obtained
            SearchFailure: If the search call fails
        """
        limit = limit if limit is not None else self.config.limit

        try:
            result = self.sp.search(
                q=query,
                type="track",
                limit=limit,
                market=self.config.market,
            )
        except spotipy.SpotifyException as e:
            logger.error("Error searching tracks for %r: %s %s", query, e.http_status, e.msg)
            raise SearchFailure(
                "Failed to search tracks", status=e.http_status, details=e.msg
            ) from e
        except requests.RequestException as e:
            logger.error("Error searching tracks for %r: %s", query, e)
            raise SearchFailure("Failed to search tracks", details=str(e)) from e

        items = ((result or {}).get("tracks") or {}).get("items") or []
        return [Track.from_spotify(item) for item in items if item]
