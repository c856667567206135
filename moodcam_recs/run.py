#!/usr/bin/env python
"""
MoodCam Recs - Quick Run Script
===============================

Starts the HTTP API on PORT (default 3000).

Usage:
    python -m moodcam_recs.run
"""

import sys

from moodcam_recs.cli import run_server
from moodcam_recs.config import HOST, PORT, integration_status
from moodcam_recs.utils import setup_logging


def main():
    setup_logging()

    # Check credentials
    missing = [name for name, state in integration_status().items() if state == "Missing"]
    if missing:
        print(f"Warning: credentials missing for: {', '.join(missing)}")
        print()
        print("Set these environment variables (or put them in .env):")
        print("  GEMINI_API_KEY=your_gemini_key")
        print("  SPOTIFY_CLIENT_ID=your_client_id")
        print("  SPOTIFY_CLIENT_SECRET=your_client_secret")
        print()

    print(f"🎵 MoodCam Recs server running on http://localhost:{PORT}")
    run_server(HOST, PORT)


if __name__ == '__main__':
    sys.exit(main())
