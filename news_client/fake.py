from datetime import timezone
from typing import Optional

from faker import Faker

from news_server.models import NewsInfo


def make_faker(seed: Optional[int] = None) -> Faker:
    fake = Faker()
    if seed is not None:
        fake.seed_instance(seed)
    return fake


def fake_news_info(fake: Optional[Faker] = None) -> NewsInfo:
    fake = fake or make_faker()
    return NewsInfo(
        title=fake.sentence(nb_words=3, variable_nb_words=False),
        context=fake.paragraph(nb_sentences=2),
        reporter=fake.name(),
        country=fake.country(),
        time=fake.date_time_between(start_date="-125y", end_date="now", tzinfo=timezone.utc),
    )
