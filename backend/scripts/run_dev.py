#!/usr/bin/env python3
"""Start the Community Hub API locally with auto-reload.

Usage:
    python backend/scripts/run_dev.py [--host HOST] [--port PORT] [--no-reload]

Host and port default to HUB_API_HOST / HUB_API_PORT (127.0.0.1:4000).
"""

import argparse
import os
import sys
from pathlib import Path

import uvicorn

BACKEND_DIR = Path(__file__).resolve().parent.parent
REPO_ROOT = BACKEND_DIR.parent
SRC_DIR = BACKEND_DIR / "src"
sys.path.insert(0, str(SRC_DIR))


def parse_args(argv=None):
    parser = argparse.ArgumentParser(description="Run the Community Hub development server")
    parser.add_argument("--host", help="Interface to bind (default: HUB_API_HOST)")
    parser.add_argument("--port", type=int, help="Port to listen on (default: HUB_API_PORT)")
    parser.add_argument("--no-reload", action="store_true", help="Disable auto-reload on source changes")
    return parser.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)

    os.environ.setdefault("HUB_ENVIRONMENT", "development")
    os.environ.setdefault("HUB_DEBUG", "true")
    os.environ.setdefault("HUB_LOG_LEVEL", "DEBUG")
    # Relative settings (./public, ./data/logs) resolve against the repo root
    os.chdir(REPO_ROOT)

    from community_hub.core.config import get_settings_instance

    settings = get_settings_instance()
    host = args.host or settings.api_host
    port = args.port or settings.api_port

    print(f"Database: {settings.database_url}")
    print(f"Server running on http://{host}:{port} (docs at /docs)")

    uvicorn.run(
        "community_hub.main:app",
        host=host,
        port=port,
        reload=not args.no_reload,
        reload_dirs=[str(SRC_DIR)],
        app_dir=str(SRC_DIR),
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
