"""
stayhub.api.__main__

Entrypoint for `python -m stayhub.api` and the `stayhub-api` console script.
"""

from __future__ import annotations

import uvicorn

from stayhub.api.app import create_app
from stayhub.settings import get_settings


def main() -> None:
    settings = get_settings()
    uvicorn.run(
        create_app(settings=settings),
        host=settings.api_host,
        port=settings.api_port,
        log_config=None,  # structlog
        access_log=False,  # RequestContextMiddleware logs request_completed
    )


if __name__ == "__main__":
    main()
