#!/usr/bin/env python3
"""Start the account gateway on PORT (default 8080)."""

import logging
import os
import sys

from config import ConfigError, config

logger = logging.getLogger("server")


def main():
    logging.basicConfig(
        level=os.getenv('LOG_LEVEL', 'INFO'),
        format="%(asctime)s %(levelname)s [%(name)s] %(message)s",
    )

    from app import create_app

    config_name = os.getenv('APP_ENV', 'production')
    if config_name not in config:
        logger.error(f"Unknown APP_ENV {config_name!r}; expected one of {sorted(config)}")
        sys.exit(1)

    try:
        app = create_app(config_name)
    except ConfigError as e:
        logger.error(f"Refusing to start: {e}")
        sys.exit(1)

    port = app.config['PORT']
    logger.info(f"Server is listening on port {port}")
    app.run(host='0.0.0.0', port=port)


if __name__ == "__main__":
    main()
