"""Entry point for the Catalog View Service.

This script serves the FastAPI application with uvicorn.  It is
intended to be executed from the project root, for example under
Docker, where you only specify a single Python file to run.

Configuration such as the upstream API URL, host and port is read
from environment variables; see ``catalog_view/app/core/config.py``.

Usage:
    python run.py
"""

from uvicorn import Config, Server

from catalog_view.app.core.config import settings
from catalog_view.app.main import app


def main() -> None:
    """Serve the application on the configured host and port."""
    config = Config(
        app=app,
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    server = Server(config)
    server.run()


if __name__ == "__main__":
    try:
        main()
    except (KeyboardInterrupt, SystemExit):
        pass
