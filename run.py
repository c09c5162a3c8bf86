"""Entry point for running the Academy API with Uvicorn.

Host and port are read from the ``HOST`` and ``PORT`` environment
variables.  Defaults are ``0.0.0.0`` and ``8000``.

Usage:
    python run.py
"""
import os

import uvicorn

from academy_api.app.core.config import settings


def main() -> None:
    host = os.getenv("HOST", "0.0.0.0")
    port = int(os.getenv("PORT", "8000"))
    uvicorn.run(
        "academy_api.app.main:app",
        host=host,
        port=port,
        reload=settings.debug,
        log_level=settings.log_level.lower(),
    )


if __name__ == "__main__":
    main()
