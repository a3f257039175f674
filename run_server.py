#!/usr/bin/env python
"""
Run script for the listing assistant API.
Use: python run_server.py
Or: uvicorn listing_assistant.api.app:app
"""
import sys
import subprocess

from listing_assistant.config import get_config


def main():
    """Run the API server."""
    config = get_config()
    subprocess.run([
        sys.executable, "-m", "uvicorn",
        "listing_assistant.api.app:app",
        f"--host={config.server.host}",
        f"--port={config.server.port}",
        "--no-access-log",
    ])


if __name__ == "__main__":
    main()
