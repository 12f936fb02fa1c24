import logging
import sys

import requests
from rich.console import Console

from news_client import config
from news_client.client import NewsClient, NewsClientError
from news_client.fake import fake_news_info
from news_server.models import News

logger = logging.getLogger("news_client")
console = Console()


def show(label: str, news: News):
    console.print(f"[red]{label}:[/red]")
    console.print(f"[green]{news.model_dump_json(by_alias=True, indent=2)}[/green]")


def run(client: NewsClient, count: int) -> int:
    for _ in range(count):
        try:
            created = client.create_news(fake_news_info())
            show("News created", created)

            fetched = client.get_news(created.id)
        except (requests.RequestException, NewsClientError) as e:
            logger.error("Request failed: %s", e)
            return 1

        if fetched is None:
            logger.error("News %d not found after create", created.id)
            return 1
        show("News fetched", fetched)
    return 0


def main():
    logging.basicConfig(level=logging.INFO, format="%(asctime)s %(levelname)s %(name)s: %(message)s")
    client = NewsClient(config.BASE_URL, timeout=config.TIMEOUT)
    try:
        code = run(client, config.COUNT)
    finally:
        client.close()
    sys.exit(code)


if __name__ == "__main__":
    main()
