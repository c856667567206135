"""
MoodCam Recs - Webcam Mood Music Recommender
============================================

Detects the mood in a webcam photo with a Gemini vision model and suggests
matching Spotify tracks.

Modules:
    - config: Configuration and constants
    - errors: Failure types
    - credentials: Spotify client-credentials token cache
    - classifier: Gemini mood classifier
    - moods: Mood-to-query mapping
    - spotify_client: Spotify API wrapper
    - recommender: Pipeline orchestrator
    - app: HTTP API
    - cli: Command-line interface
"""

__version__ = "1.0.0"
__author__ = "MoodCam Team"
