from __future__ import annotations

import json
import logging
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path
from typing import Iterable, Protocol

from ..data_ingestion.config import DEFAULT_INGESTION_CONFIG
from ..data_ingestion.ingest import parse_restaurant_csv
from .grouper import group_restaurants_by_name, normalize_restaurant_name
from .models import RestaurantGroup, RestaurantRecord

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class StoredDataset:
    restaurants: list[RestaurantRecord]
    updated_at: str | None
    count: int


@dataclass(frozen=True)
class LoadedDataset:
    restaurants: list[RestaurantRecord]
    updated_at: str | None
    source: str


class RestaurantRepository(Protocol):
    def load(self) -> StoredDataset | None: ...

    def save(self, records: Iterable[RestaurantRecord]) -> StoredDataset: ...

    def clear(self) -> None: ...


def _named(records: Iterable[RestaurantRecord]) -> list[RestaurantRecord]:
    return [r for r in records if normalize_restaurant_name(r.name)]


def _prepare_upload(records: Iterable[RestaurantRecord]) -> StoredDataset:
    named = _named(records)
    if not named:
        raise ValueError("No restaurant data provided")
    return StoredDataset(
        restaurants=named,
        updated_at=datetime.now(timezone.utc).isoformat(),
        count=len(named),
    )


class InMemoryRepository:
    """Keeps the uploaded dataset for the lifetime of the process."""

    def __init__(self) -> None:
        self._dataset: StoredDataset | None = None

    def load(self) -> StoredDataset | None:
        return self._dataset

    def save(self, records: Iterable[RestaurantRecord]) -> StoredDataset:
        self._dataset = _prepare_upload(records)
        return self._dataset

    def clear(self) -> None:
        self._dataset = None


class JsonFileRepository:
    """Stores the uploaded dataset as a single JSON document, replaced on each save."""

    def __init__(self, path: Path) -> None:
        self.path = Path(path)

    def load(self) -> StoredDataset | None:
        if not self.path.exists():
            return None
        payload = json.loads(self.path.read_text(encoding="utf-8"))
        restaurants = [
            RestaurantRecord.model_validate(item)
            for item in payload.get("restaurants", [])
        ]
        return StoredDataset(
            restaurants=restaurants,
            updated_at=payload.get("updatedAt"),
            count=payload.get("count", len(restaurants)),
        )

    def save(self, records: Iterable[RestaurantRecord]) -> StoredDataset:
        dataset = _prepare_upload(records)
        payload = {
            "restaurants": [r.model_dump(by_alias=True) for r in dataset.restaurants],
            "updatedAt": dataset.updated_at,
            "count": dataset.count,
        }
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(json.dumps(payload, indent=2), encoding="utf-8")
        logger.info("Stored %d restaurants in %s", dataset.count, self.path)
        return dataset

    def clear(self) -> None:
        if self.path.exists():
            self.path.unlink()


_repository: RestaurantRepository | None = None
_sample_csv: Path = DEFAULT_INGESTION_CONFIG.sample_csv_path


def get_repository() -> RestaurantRepository:
    """Return the active repository, creating the file-backed one on first call."""
    global _repository
    if _repository is None:
        _repository = JsonFileRepository(DEFAULT_INGESTION_CONFIG.store_path)
    return _repository


def set_repository(repository: RestaurantRepository | None) -> None:
    global _repository
    _repository = repository


def set_sample_csv(path: Path) -> None:
    global _sample_csv
    _sample_csv = Path(path)


def load_restaurants() -> LoadedDataset:
    """Resolve the active dataset: uploaded data first, then the sample CSV."""
    stored = get_repository().load()
    if stored is not None and stored.restaurants:
        logger.info("Loaded %d restaurants from uploaded data", len(stored.restaurants))
        return LoadedDataset(
            restaurants=_named(stored.restaurants),
            updated_at=stored.updated_at,
            source="upload",
        )

    if _sample_csv.exists():
        records = parse_restaurant_csv(_sample_csv)
        logger.info("Loaded %d restaurants from %s", len(records), _sample_csv.name)
        return LoadedDataset(restaurants=records, updated_at=None, source="csv")

    logger.warning("No restaurant data available")
    return LoadedDataset(restaurants=[], updated_at=None, source="none")


def get_groups() -> list[RestaurantGroup]:
    return group_restaurants_by_name(load_restaurants().restaurants)
