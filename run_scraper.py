"""
Simple runner - just run: python run_scraper.py <instagram_video_url>

Usage:
    python run_scraper.py https://www.instagram.com/reel/ID/               # Headless download
    python run_scraper.py https://www.instagram.com/reel/ID/ --visible     # Show browser window
    python run_scraper.py https://www.instagram.com/reel/ID/ --output-dir videos
"""
import os
import sys

# Make the package importable without installing it
sys.path.insert(0, os.path.dirname(os.path.abspath(__file__)))

from reel_scraper.main import main


if __name__ == '__main__':
    try:
        sys.exit(main())
    except KeyboardInterrupt:
        print("\nStopped.")
        sys.exit(130)
