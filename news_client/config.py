import os

BASE_URL = os.getenv("NEWS_BASE_URL", "http://localhost:8080").rstrip("/")
TIMEOUT = float(os.getenv("NEWS_TIMEOUT", "5"))
COUNT = int(os.getenv("NEWS_COUNT", "1"))
