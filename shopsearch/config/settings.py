# shopsearch/config/settings.py

"""Central configuration for the shopsearch application."""

import os
from pathlib import Path

from curl_cffi.requests import BrowserTypeLiteral
from dotenv import load_dotenv

load_dotenv()


class Settings:
    """Central configuration for the shopsearch application."""

    # --- Upstream provider (Zenserp) ---
    ZENSERP_API_KEY: str | None = os.getenv("ZENSERP_API_KEY") or None
    ZENSERP_SEARCH_URL: str = "https://app.zenserp.com/api/v2/search"
    ZENSERP_SHOPPING_URL: str = "https://app.zenserp.com/api/v1/shopping"
    SEARCH_MODE: str = "shop"           # Zenserp ``tbm`` parameter
    DETAIL_LOCATION: str = "Manhattan,New York,United States"

    # --- HTTP ---
    REQUEST_TIMEOUT: int = 15           # Seconds before a request times out
    IMPERSONATE_BROWSER: BrowserTypeLiteral = "chrome131"

    # --- Normalisation defaults ---
    PLACEHOLDER_IMAGE_URL: str = "https://via.placeholder.com/150"
    UNKNOWN_LABEL: str = "Unknown"
    PRODUCT_LINK_BASE: str = "https://www.google.com"

    # --- API server ---
    API_HOST: str = os.getenv("SHOPSEARCH_HOST", "127.0.0.1")
    API_PORT: int = int(os.getenv("SHOPSEARCH_PORT", "8000"))
    API_BASE_URL: str = os.getenv(
        "SHOPSEARCH_API_URL", f"http://{API_HOST}:{API_PORT}"
    )

    # --- Paths ---
    BASE_DIR: Path = Path(__file__).resolve().parent.parent.parent
    LOGS_DIR: Path = Path(os.getenv("SHOPSEARCH_LOG_DIR") or BASE_DIR / "logs")

    # --- Logging ---
    CONSOLE_LOG_LEVEL: str = os.getenv("SHOPSEARCH_LOG_LEVEL", "WARNING")
    SERVER_LOGGERS: tuple[str, ...] = ("uvicorn.error", "uvicorn.access")
