"""Entrypoint: run the citation grounding API server."""

import uvicorn

from citation_grounding.api.app import create_app
from citation_grounding.config.settings import Settings


def main() -> None:
    settings = Settings()
    app = create_app(settings)
    uvicorn.run(app, host=settings.host, port=settings.port, log_level=settings.log_level.lower())


if __name__ == "__main__":
    main()
