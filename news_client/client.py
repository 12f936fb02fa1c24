import logging
from typing import Optional

import requests

from news_server.models import News, NewsInfo

logger = logging.getLogger(__name__)

CREATE_PATH = "/news"
GET_PATH = "/news/{news_id}"


class NewsClientError(Exception):
    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.status_code = status_code


class NewsClient:
    def __init__(self, base_url: str, timeout: float = 5.0, session: Optional[requests.Session] = None):
        self.base_url = base_url.rstrip("/")
        self.timeout = timeout
        self.session = session or requests.Session()

    def create_news(self, info: NewsInfo) -> News:
        resp = self.session.post(
            f"{self.base_url}{CREATE_PATH}",
            json=info.model_dump(mode="json"),
            timeout=self.timeout,
        )
        if resp.status_code != 201:
            raise NewsClientError(f"Failed to create news: {resp.status_code}", resp.status_code)
        return News.model_validate(resp.json())

    def get_news(self, news_id: int) -> Optional[News]:
        resp = self.session.get(
            f"{self.base_url}{GET_PATH.format(news_id=news_id)}",
            timeout=self.timeout,
        )
        if resp.status_code == 404:
            logger.debug("News %d not found", news_id)
            return None
        if resp.status_code != 200:
            raise NewsClientError(f"Failed to get news: {resp.status_code}", resp.status_code)
        return News.model_validate(resp.json())

    def close(self):
        self.session.close()
