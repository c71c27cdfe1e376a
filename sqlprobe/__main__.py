import logging

from . import create_app
from .config import Config


def main() -> None:
    logging.basicConfig(level=Config.LOG_LEVEL)
    app = create_app()
    logging.getLogger(__name__).info("listening on %s:%s", Config.BIND_HOST, Config.BIND_PORT)
    app.run(host=Config.BIND_HOST, port=Config.BIND_PORT)


if __name__ == "__main__":
    main()
