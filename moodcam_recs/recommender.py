"""
Mood Recommendation Pipeline
============================

Orchestrates the two user-facing operations:
1. Analyze a webcam frame into a mood label
2. Turn a mood label into catalog track recommendations

This module ties the components together independently of any transport;
the HTTP layer in app.py and the CLI both call into it.
"""

import json
import logging
from dataclasses import dataclass
from typing import List, Dict, Optional

from .classifier import MoodClassifier
from .spotify_client import SpotifyClient, Track
from .moods import normalize_mood, resolve_query
from .errors import InvalidInput
from .config import SEARCH_LIMIT

logger = logging.getLogger(__name__)


@dataclass
class RecommendationOutput:
    """Tracks recommended for a mood."""
    mood: str
    query: str
    tracks: List[Track]

    def to_dict(self) -> Dict:
        """Convert to the response body shape."""
        return {
            "tracks": [t.to_dict() for t in self.tracks],
            "mood": self.mood,
        }

    def to_json(self, indent: int = 2) -> str:
        """Convert to JSON string."""
        return json.dumps(self.to_dict(), indent=indent)


class MoodRecommender:
    """
    Pipeline from webcam frame to track list.

    Usage:
        recommender = MoodRecommender()
        mood = recommender.analyze_mood(image_b64)
        result = recommender.recommend(mood)
        print(result.to_json())
    """

    def __init__(
        self,
        classifier: Optional[MoodClassifier] = None,
        spotify_client: Optional[SpotifyClient] = None,
        search_limit: int = SEARCH_LIMIT,
    ):
        """
        Initialize the pipeline.

        Args:
            classifier: Mood classifier (creates new if None)
            spotify_client: Pre-configured Spotify client (creates new if None)
            search_limit: Number of tracks to request per recommendation
        """
        self.classifier = classifier or MoodClassifier()
        self.spotify = spotify_client or SpotifyClient()
        self.search_limit = search_limit

    def analyze_mood(self, image: Optional[str]) -> str:
        """
        Detect the mood in a captured frame.

        Args:
            image: Base64 JPEG or data URI

        Returns:
            Lowercased mood label as produced by the model

        Raises:
            InvalidInput: If no image was given
            ClassificationFailure: If the model call fails
        """
        if not image:
            raise InvalidInput("No image provided")
        return self.classifier.classify(image)

    def recommend(self, mood: Optional[str]) -> RecommendationOutput:
        """
        Find tracks matching a mood.

        Unknown moods are searched with the default mood's query.

        Args:
            mood: Mood label in any case

        Returns:
            RecommendationOutput echoing the mood as received

        Raises:
            InvalidInput: If no mood was given
            AuthenticationFailure: If the catalog token exchange fails
            SearchFailure: If the catalog search fails
        """
        if not mood:
            raise InvalidInput("No mood provided")

        query = resolve_query(normalize_mood(mood))
        logger.info("🔎 Searching tracks for mood %r with query %r", mood, query)

        tracks = self.spotify.search_tracks(query, limit=self.search_limit)
        return RecommendationOutput(mood=mood, query=query, tracks=tracks)
