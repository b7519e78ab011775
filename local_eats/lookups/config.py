from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path

from dotenv import load_dotenv

from ..data_ingestion.config import DEFAULT_INGESTION_CONFIG

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")


@dataclass(frozen=True)
class LookupConfig:
    api_key: str = os.getenv("GOOGLE_PLACES_API_KEY", "")
    text_search_url: str = "https://maps.googleapis.com/maps/api/place/textsearch/json"
    timeout: float = 10.0
    address_cache_path: Path | None = Path(
        os.getenv("ADDRESS_CACHE_PATH", str(DEFAULT_INGESTION_CONFIG.data_dir / "address-cache.json"))
    )
    price_cache_max_age: float = 365 * 24 * 60 * 60


DEFAULT_LOOKUP_CONFIG = LookupConfig()
