import logging
import re
from typing import Optional

from fastapi import FastAPI, HTTPException

from news_server.builder import Clock, NewsIdGenerator, create_news, utc_now
from news_server.models import News, NewsInfo
from news_server.news_store import NewsStore

logger = logging.getLogger(__name__)

CREATE_PATH = "/news"
GET_PATH = "/news/{news_id}"

_INT64_RE = re.compile(r"[+-]?[0-9]+")
_INT64_MIN = -(2**63)
_INT64_MAX = 2**63 - 1


def parse_news_id(raw: str) -> int:
    """Parse a base-10 int64 id. Raises ValueError on anything else."""
    if not _INT64_RE.fullmatch(raw):
        raise ValueError(f"not a base-10 integer: {raw!r}")
    value = int(raw)
    if not _INT64_MIN <= value <= _INT64_MAX:
        raise ValueError(f"out of int64 range: {raw!r}")
    return value


def create_app(
    store: Optional[NewsStore] = None,
    id_generator: Optional[NewsIdGenerator] = None,
    clock: Clock = utc_now,
) -> FastAPI:
    store = store if store is not None else NewsStore()
    id_generator = id_generator if id_generator is not None else NewsIdGenerator()

    app = FastAPI(title="news")
    app.state.store = store

    @app.post(CREATE_PATH, status_code=201, response_model=News, response_model_by_alias=True)
    def create(info: NewsInfo):
        return create_news(store, info, id_generator, clock)

    @app.get(GET_PATH, response_model=News, response_model_by_alias=True)
    def read(news_id: str):
        try:
            parsed = parse_news_id(news_id)
        except ValueError:
            raise HTTPException(status_code=400, detail="Invalid news ID")

        news = store.get(parsed)
        if news is None:
            logger.debug("News %d not found", parsed)
            raise HTTPException(status_code=404, detail="News not found")
        return news

    @app.get("/health")
    def health():
        return {"status": "ok"}

    return app
