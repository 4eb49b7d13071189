from __future__ import annotations

import os

import uvicorn

from gcharts.interfaces.api.app import create_app
from gcharts.shared.config import get_settings


app = create_app()


def main() -> None:
    settings = get_settings()
    reload = os.getenv("GCHARTS_API_RELOAD", "0").strip().lower() in {"1", "true", "yes"}
    uvicorn.run(
        "gcharts.interfaces.api.main:app",
        host=settings.api_host,
        port=settings.api_port,
        reload=reload,
    )


if __name__ == "__main__":
    main()
