"""
Command-Line Interface for MoodCam Recs
=======================================

Usage:
    python -m moodcam_recs.cli <command> [options]

Commands:
    serve       Run the HTTP API
    analyze     Detect the mood in an image file
    recommend   Get tracks for a mood

Examples:
    python -m moodcam_recs.cli serve --port 3000
    python -m moodcam_recs.cli analyze selfie.jpg --recommend
    python -m moodcam_recs.cli recommend calm -n 5 --format simple
"""

import argparse
import logging
import sys
from typing import List, Optional

from .recommender import MoodRecommender, RecommendationOutput
from .errors import MoodCamError
from .config import HOST, PORT, SEARCH_LIMIT, SUPPORTED_MOODS
from .utils import setup_logging, load_image_as_base64, format_duration

logger = logging.getLogger(__name__)


def create_parser() -> argparse.ArgumentParser:
    """Create argument parser for CLI."""
    parser = argparse.ArgumentParser(
        prog='moodcam_recs',
        description='🎵 MoodCam Recs - Webcam Mood Music Recommendations',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Environment Variables:
  GEMINI_API_KEY         Gemini API key for mood detection
  SPOTIFY_CLIENT_ID      Your Spotify API client ID
  SPOTIFY_CLIENT_SECRET  Your Spotify API client secret
  PORT                   Port for the HTTP API (default: 3000)
        """
    )
    parser.add_argument(
        '-v', '--verbose',
        action='store_true',
        help='Enable debug logging'
    )

    subparsers = parser.add_subparsers(dest='command', required=True)

    serve = subparsers.add_parser('serve', help='Run the HTTP API')
    serve.add_argument('--host', type=str, default=HOST, help=f'Bind address (default: {HOST})')
    serve.add_argument('--port', type=int, default=PORT, help=f'Port (default: {PORT})')
    serve.add_argument('--reload', action='store_true', help='Reload on code changes')

    analyze = subparsers.add_parser('analyze', help='Detect the mood in an image file')
    analyze.add_argument('image', type=str, help='Path to a JPEG image')
    analyze.add_argument(
        '--recommend',
        action='store_true',
        help='Also fetch tracks for the detected mood'
    )
    _add_output_args(analyze)

    recommend = subparsers.add_parser('recommend', help='Get tracks for a mood')
    recommend.add_argument(
        'mood',
        type=str,
        help=f'Mood label, one of: {", ".join(SUPPORTED_MOODS)}'
    )
    _add_output_args(recommend)

    return parser


def _add_output_args(subparser: argparse.ArgumentParser) -> None:
    subparser.add_argument(
        '-n', '--num',
        type=int,
        default=SEARCH_LIMIT,
        help=f'Number of tracks to fetch (default: {SEARCH_LIMIT})'
    )
    subparser.add_argument(
        '-o', '--output',
        type=str,
        default=None,
        help='Output file path (default: print to stdout)'
    )
    subparser.add_argument(
        '--format',
        type=str,
        choices=['json', 'simple'],
        default='json',
        help='Output format (default: json)'
    )


def format_output(result: RecommendationOutput, fmt: str) -> str:
    """Format recommendation output based on requested format."""
    if fmt == 'simple':
        lines = [
            f"🎭 Mood: {result.mood}",
            f"🔎 Query: {result.query}",
            "",
            "Top {0} Tracks:".format(len(result.tracks)),
            "-" * 50,
        ]
        for i, track in enumerate(result.tracks, 1):
            lines.append(f"{i:2}. {track.name} ({format_duration(track.duration_ms)})")
            lines.append(f"    Artists: {track.artist}")
            lines.append(f"    Album: {track.album}")
            lines.append(f"    Link: {track.external_url}")
            lines.append("")
        return '\n'.join(lines)

    return result.to_json()


def write_output(output: str, path: Optional[str]) -> None:
    if path:
        with open(path, 'w', encoding='utf-8') as f:
            f.write(output)
        print(f"✅ Output saved to: {path}")
    else:
        print(output)


def run_server(host: str, port: int, reload: bool = False) -> None:
    """Serve the HTTP API with uvicorn."""
    import uvicorn

    uvicorn.run("moodcam_recs.app:app", host=host, port=port, reload=reload)


def main(argv: Optional[List[str]] = None, recommender: Optional[MoodRecommender] = None) -> int:
    """Main entry point for CLI."""
    parser = create_parser()
    args = parser.parse_args(argv)

    setup_logging('DEBUG' if args.verbose else None)

    if args.command == 'serve':
        run_server(args.host, args.port, args.reload)
        return 0

    try:
        recommender = recommender or MoodRecommender(search_limit=args.num)

        if args.command == 'analyze':
            mood = recommender.analyze_mood(load_image_as_base64(args.image))
            if not args.recommend:
                write_output(mood, args.output)
                return 0
        else:
            mood = args.mood

        result = recommender.recommend(mood)
        write_output(format_output(result, args.format), args.output)
        return 0

    except (MoodCamError, OSError) as e:
        print(f"❌ Error: {str(e)}", file=sys.stderr)
        if args.verbose:
            logger.exception("Command failed")
        return 1


if __name__ == '__main__':
    sys.exit(main())
