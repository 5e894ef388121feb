"""
Run the Storefront API with Uvicorn.

Host and port are read from the HOST and PORT environment variables
(defaults 0.0.0.0 and 8000).

Usage:
    python -m storefront
"""
from uvicorn import Config, Server

from storefront.core.config import get_settings


def main() -> None:
    settings = get_settings()
    config = Config(
        app="storefront.main:app",
        host=settings.host,
        port=settings.port,
        reload=False,
        log_level=settings.log_level.lower(),
    )
    Server(config).run()


if __name__ == "__main__":
    main()
