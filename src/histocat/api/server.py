"""
ASGI Entry Point for the histocat API.

This module exposes the `app` object required by ASGI servers (Uvicorn/Gunicorn).
It loads environment variables from `.env` before the application factory runs
so that `HISTOCAT_*` settings are visible to it.

Usage
-----
Run via the module entry point:
    $ python -m histocat.api.server

Or via uvicorn directly:
    $ uvicorn histocat.api.server:app --reload
"""

from pathlib import Path

import uvicorn
from dotenv import load_dotenv

from histocat.api.app import create_app
from histocat.core.settings import load_settings

load_dotenv(dotenv_path=Path(".env"))

app = create_app()


def main() -> None:
    """Run the API server locally for development."""
    cfg = load_settings()
    uvicorn.run(
        "histocat.api.server:app",
        host="0.0.0.0",
        port=8000,
        reload=cfg.is_dev,
        log_level=cfg.log_level.lower(),
    )


if __name__ == "__main__":
    main()
