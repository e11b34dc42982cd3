"""
Configuration loaded from the environment (and a .env file when present)
"""
import os
from dotenv import load_dotenv

# Load environment variables
load_dotenv()


def _get_int(name, default):
    value = os.getenv(name)
    if value is None or value == "":
        return default
    try:
        return int(value)
    except ValueError:
        raise ValueError(f"{name} must be an integer, got '{value}'")


class Config:
    """Settings shared by the CLI, the invoker and the search service"""

    def __init__(self):
        self.base_url = os.getenv("SEARCH_BASE_URL", "http://127.0.0.1:5000")
        self.index_path = os.getenv("INDEX_PATH", "index.json")
        self.result_limit = _get_int("SEARCH_RESULT_LIMIT", 10)
        self.cache_max_size = _get_int("CACHE_MAX_SIZE", 100)
        self.cache_ttl = _get_int("CACHE_TTL", 3600)
        self.log_level = os.getenv("LOG_LEVEL", "INFO").upper()
        self.port = _get_int("PORT", 5000)
