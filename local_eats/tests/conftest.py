from __future__ import annotations

import pytest

from local_eats.data_ingestion.config import DEFAULT_INGESTION_CONFIG
from local_eats.restaurants.data_store import (
    InMemoryRepository,
    set_repository,
    set_sample_csv,
)


@pytest.fixture(autouse=True)
def _fresh_dataset():
    """Every test starts from the bundled sample CSV with no uploaded data."""
    set_repository(InMemoryRepository())
    set_sample_csv(DEFAULT_INGESTION_CONFIG.sample_csv_path)
    yield
    set_repository(None)
