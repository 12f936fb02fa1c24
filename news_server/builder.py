import logging
import random
import threading
from datetime import datetime, timezone
from typing import Callable, Optional

from news_server.models import News, NewsInfo
from news_server.news_store import NewsStore

logger = logging.getLogger(__name__)

Clock = Callable[[], datetime]


def utc_now() -> datetime:
    return datetime.now(timezone.utc)


class NewsIdGenerator:
    """Random non-negative 63-bit ids from a generator seeded once.

    Not a uniqueness guarantee: a collision overwrites the older record.
    """

    def __init__(self, seed: Optional[int] = None):
        # seed=None pulls from os.urandom
        self._rng = random.Random(seed)
        self._lock = threading.Lock()

    def next_id(self) -> int:
        with self._lock:
            return self._rng.getrandbits(63)


def build_news(info: NewsInfo, id_generator: NewsIdGenerator, clock: Clock = utc_now) -> News:
    now = clock()
    return News(
        id=id_generator.next_id(),
        info=info,
        created_at=now,
        updated_at=now,
    )


def create_news(
    store: NewsStore,
    info: NewsInfo,
    id_generator: NewsIdGenerator,
    clock: Clock = utc_now,
) -> News:
    """Build a record for ``info`` and insert it into ``store``."""
    news = build_news(info, id_generator, clock)
    store.insert(news)
    logger.info("Created news %d: %r", news.id, news.info.title)
    return news
