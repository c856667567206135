# tests/conftest.py
from unittest.mock import MagicMock

import pytest


class FakeClock:
    """Manually advanced replacement for time.time."""

    def __init__(self, now: float = 1000.0):
        self.now = now

    def __call__(self) -> float:
        return self.now


@pytest.fixture
def clock():
    return FakeClock()


@pytest.fixture
def token_response():
    """Successful token endpoint response."""
    def _make(token="token-1", expires_in=3600, status=200):
        response = MagicMock()
        response.ok = 200 <= status < 300
        response.status_code = status
        response.json.return_value = {
            "access_token": token,
            "token_type": "Bearer",
            "expires_in": expires_in,
        }
        return response
    return _make


@pytest.fixture
def raw_track():
    """Raw Spotify track object as found in search results."""
    def _make(track_id="t1", artists=("Artist A",), images=("https://img/1.jpg",)):
        return {
            "id": track_id,
            "name": f"Song {track_id}",
            "artists": [{"id": f"a{i}", "name": name} for i, name in enumerate(artists)],
            "album": {
                "name": f"Album {track_id}",
                "images": [{"url": url, "width": 640, "height": 640} for url in images],
            },
            "preview_url": None,
            "external_urls": {"spotify": f"https://open.spotify.com/track/{track_id}"},
            "duration_ms": 187000,
        }
    return _make


@pytest.fixture
def search_result(raw_track):
    """Spotify search response wrapping the given raw tracks."""
    def _make(*items):
        return {"tracks": {"items": list(items), "total": len(items)}}
    return _make
