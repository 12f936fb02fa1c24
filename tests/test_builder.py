"""Record builder tests."""

from datetime import datetime, timezone

from news_server.builder import NewsIdGenerator, build_news, create_news
from news_server.models import NewsInfo
from news_server.news_store import NewsStore

FIXED = datetime(2024, 5, 17, 8, 30, tzinfo=timezone.utc)


def sample_info():
    return NewsInfo(
        title="Bridge opens river",
        context="Well begun is half done.",
        reporter="Mei Tanaka",
        country="Japan",
        time=datetime(2020, 1, 1, tzinfo=timezone.utc),
    )


def test_build_sets_equal_timestamps():
    news = build_news(sample_info(), NewsIdGenerator(seed=1), clock=lambda: FIXED)
    assert news.created_at == news.updated_at == FIXED


def test_build_uses_real_clock_by_default():
    news = build_news(sample_info(), NewsIdGenerator(seed=1))
    assert news.created_at == news.updated_at
    assert news.created_at.tzinfo is not None


def test_ids_are_non_negative_int63():
    gen = NewsIdGenerator(seed=3)
    ids = [gen.next_id() for _ in range(1000)]
    assert all(0 <= i < 2**63 for i in ids)
    assert len(set(ids)) == len(ids)


def test_seeded_generator_is_deterministic():
    a = NewsIdGenerator(seed=99)
    b = NewsIdGenerator(seed=99)
    assert [a.next_id() for _ in range(5)] == [b.next_id() for _ in range(5)]


def test_create_news_inserts_into_store():
    store = NewsStore()
    news = create_news(store, sample_info(), NewsIdGenerator(seed=5), clock=lambda: FIXED)
    assert store.get(news.id) == news
    assert news.info == sample_info()


class _FixedIds:
    def __init__(self, value):
        self.value = value

    def next_id(self):
        return self.value


def test_id_collision_last_writer_wins():
    store = NewsStore()
    create_news(store, sample_info(), _FixedIds(11), clock=lambda: FIXED)
    second = sample_info().model_copy(update={"title": "Second"})
    create_news(store, second, _FixedIds(11), clock=lambda: FIXED)
    assert len(store) == 1
    assert store.get(11).info.title == "Second"
