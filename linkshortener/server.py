"""Process entry point

Usage:
    python -m linkshortener
    linkshortener

See `linkshortener.utils.config` for the environment variables read at startup.
"""

import logging

import uvicorn

from linkshortener.api import create_app
from linkshortener.dao.memory import ShortURLMemoryDAO
from linkshortener.store import ShortURLStore
from linkshortener.utils import initialize_logging, load_config, app_env


logger = logging.getLogger(__name__)


def main() -> None:
    initialize_logging()
    config = load_config()

    # The one store for this process, empty until the first /shorten request
    store = ShortURLStore(ShortURLMemoryDAO(), config)
    app = create_app(store, config)

    logger.info('Listening on %s:%s', config.host, config.port, extra={'appEnv': app_env()})
    uvicorn.run(app, host=config.host, port=config.port, log_config=None)


if __name__ == '__main__':
    main()
