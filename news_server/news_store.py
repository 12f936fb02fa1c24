import threading
from typing import Dict, Optional

from news_server.models import News


class ReadWriteLock:
    """Many readers or one writer.

    Writer-preferring: once a writer is waiting, new readers queue behind it.
    """

    def __init__(self):
        self._cond = threading.Condition(threading.Lock())
        self._readers = 0
        self._writer = False
        self._writers_waiting = 0

    def acquire_read(self):
        with self._cond:
            while self._writer or self._writers_waiting:
                self._cond.wait()
            self._readers += 1

    def release_read(self):
        with self._cond:
            self._readers -= 1
            if self._readers == 0:
                self._cond.notify_all()

    def acquire_write(self):
        with self._cond:
            self._writers_waiting += 1
            try:
                while self._writer or self._readers:
                    self._cond.wait()
            finally:
                self._writers_waiting -= 1
            self._writer = True

    def release_write(self):
        with self._cond:
            self._writer = False
            self._cond.notify_all()

    def read_locked(self):
        return _Guard(self.acquire_read, self.release_read)

    def write_locked(self):
        return _Guard(self.acquire_write, self.release_write)


class _Guard:
    def __init__(self, acquire, release):
        self._acquire = acquire
        self._release = release

    def __enter__(self):
        self._acquire()
        return self

    def __exit__(self, exc_type, exc, tb):
        self._release()
        return False


class NewsStore:
    """In-memory news storage keyed by id."""

    def __init__(self):
        self._data: Dict[int, News] = {}
        self._lock = ReadWriteLock()

    def insert(self, news: News) -> None:
        # last writer wins on id collision
        with self._lock.write_locked():
            self._data[news.id] = news

    def get(self, news_id: int) -> Optional[News]:
        with self._lock.read_locked():
            return self._data.get(news_id)

    def __contains__(self, news_id: int) -> bool:
        with self._lock.read_locked():
            return news_id in self._data

    def __len__(self) -> int:
        with self._lock.read_locked():
            return len(self._data)
