import logging

import uvicorn

from news_server import config
from news_server.app import create_app
from news_server.news_store import NewsStore


def main():
    logging.basicConfig(
        level=config.stdlib_log_level(config.LOG_LEVEL),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    app = create_app(store=NewsStore())
    uvicorn.run(app, host=config.HOST, port=config.PORT, log_level=config.LOG_LEVEL)


if __name__ == "__main__":
    main()
