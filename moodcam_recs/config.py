"""
Configuration and constants for MoodCam Recs.
"""
import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Dict, Optional, Tuple

from dotenv import load_dotenv

# Values below are read at import time, so .env must be loaded first
load_dotenv()


def _env_bool(name: str, default: bool) -> bool:
    value = os.environ.get(name)
    if value is None:
        return default
    return value.strip().lower() in {"1", "true", "yes", "y", "on"}


# =============================================================================
# GEMINI (MOOD CLASSIFICATION) CONFIGURATION
# =============================================================================
GEMINI_API_KEY = os.environ.get("GEMINI_API_KEY", "")
GEMINI_MODEL = os.environ.get("GEMINI_MODEL", "gemini-2.5-flash")
IMAGE_MIME_TYPE = "image/jpeg"

# =============================================================================
# SPOTIFY API CONFIGURATION
# =============================================================================
SPOTIFY_CLIENT_ID = os.environ.get("SPOTIFY_CLIENT_ID", "")
SPOTIFY_CLIENT_SECRET = os.environ.get("SPOTIFY_CLIENT_SECRET", "")
SPOTIFY_TOKEN_URL = "https://accounts.spotify.com/api/token"

# Timeout applied to every outbound call (token exchange, search, Gemini)
HTTP_TIMEOUT_SECONDS = float(os.environ.get("HTTP_TIMEOUT_SECONDS", "10"))

# =============================================================================
# SERVER CONFIGURATION
# =============================================================================
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "3000"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO")

# Include raw upstream error detail in 500 responses
EXPOSE_ERROR_DETAILS = _env_bool("EXPOSE_ERROR_DETAILS", True)

# =============================================================================
# SEARCH CONFIGURATION
# =============================================================================
SEARCH_LIMIT = 12


@dataclass
class SearchConfig:
    """Configuration for catalog track search."""
    # Result-count cap for the single search page requested
    limit: int = SEARCH_LIMIT

    # Optional market (ISO 3166-1 alpha-2); None lets Spotify decide
    market: Optional[str] = None


DEFAULT_SEARCH_CONFIG = SearchConfig()

# =============================================================================
# MOOD VOCABULARY
# =============================================================================
DEFAULT_MOOD = "neutral"

_MOOD_QUERY_TABLE: Dict[str, Tuple[str, ...]] = {
    "happy": ("happy pop", "feel good", "upbeat"),
    "sad": ("sad acoustic", "melancholic", "emotional ballad"),
    "energetic": ("workout", "edm", "high energy"),
    "calm": ("chill", "ambient", "peaceful"),
    "angry": ("metal", "hard rock", "aggressive"),
    "excited": ("party", "dance", "electronic"),
    "melancholic": ("blues", "jazz", "slow"),
    "anxious": ("meditation", "relaxing", "soft"),
    "peaceful": ("nature sounds", "instrumental", "zen"),
    "neutral": ("top hits", "popular", "trending"),
    "joyful": ("uplifting", "cheerful", "bright"),
    "tired": ("lo-fi", "chill beats", "relaxing"),
    "romantic": ("love songs", "romantic", "r&b"),
    "focused": ("study music", "concentration", "focus"),
    "nostalgic": ("throwback", "classic hits", "retro"),
}

# Read-only view; phrases are ordered, only the first is currently searched
MOOD_QUERIES = MappingProxyType(_MOOD_QUERY_TABLE)
SUPPORTED_MOODS: Tuple[str, ...] = tuple(_MOOD_QUERY_TABLE)


def integration_status() -> Dict[str, str]:
    """Report which external integrations have credentials configured."""
    gemini_key = os.environ.get("GEMINI_API_KEY") or GEMINI_API_KEY
    spotify_id = (
        os.environ.get("SPOTIFY_CLIENT_ID")
        or os.environ.get("SPOTIPY_CLIENT_ID")
        or SPOTIFY_CLIENT_ID
    )
    return {
        "gemini": "Configured" if gemini_key else "Missing",
        "spotify": "Configured" if spotify_id else "Missing",
    }
