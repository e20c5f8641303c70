"""
Process entrypoint: ``python -m hello_crm`` or the ``hello-crm`` script.

Loads .env before settings are read, configures logging, then serves on
APP_PORT (3000 by default) until terminated.
"""
import logging

from dotenv import load_dotenv


def main() -> None:
    load_dotenv()

    from .config import get_settings
    from .server import run

    settings = get_settings()
    logging.basicConfig(
        level=settings.log_level.upper() if settings.log_level != "trace" else logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    run(settings)


if __name__ == "__main__":
    main()
