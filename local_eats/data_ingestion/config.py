"""
Data ingestion configuration.

Paths default to the bundled ``local_eats/data`` directory and can be moved
with the ``LOCAL_EATS_DATA_DIR`` environment variable.
"""

import os
from dataclasses import dataclass, field
from pathlib import Path

from dotenv import load_dotenv

# Load .env from project root
load_dotenv(Path(__file__).resolve().parent.parent.parent / ".env")

_PACKAGE_DATA_DIR = Path(__file__).resolve().parent.parent / "data"


def _data_dir() -> Path:
    return Path(os.getenv("LOCAL_EATS_DATA_DIR", str(_PACKAGE_DATA_DIR)))


@dataclass(frozen=True)
class IngestionConfig:
    """
    Where the sample spreadsheet lives and where uploads are stored.
    """

    sample_csv_path: Path = _PACKAGE_DATA_DIR / "sample_restaurants.csv"
    data_dir: Path = field(default_factory=_data_dir)
    store_filename: str = "restaurant-data.json"

    @property
    def store_path(self) -> Path:
        return self.data_dir / self.store_filename


DEFAULT_INGESTION_CONFIG = IngestionConfig()
