from __future__ import annotations

import io
import logging
from pathlib import Path
from typing import IO, Dict, List, Union

import pandas as pd

from ..normalization.cities import has_multiple_locations, normalize_city
from ..restaurants.models import RestaurantRecord
from .config import DEFAULT_INGESTION_CONFIG, IngestionConfig

logger = logging.getLogger(__name__)

CsvSource = Union[str, Path, IO[str]]

# Record field -> spreadsheet headers seen in the wild, in priority order
COLUMN_MAPPINGS: Dict[str, List[str]] = {
    "name": ["Restaurant Name", "Restaurant name"],
    "website": ["Website link", "Website Link"],
    "city": ["City", "City:"],
    "neighborhood": ["Neighborhood/Area:", "Neighborhood/Area"],
    "cuisine_type": ["Cuisine type", "Cuisine Type"],
    "what_you_love": ["What do you love about this place?"],
    "must_have": [
        'What is/are your "Must Have" recommendation(s)?',
        'What are your "Must Have" recommendations"?',
    ],
    "reservation_needed": ["Reservation needed/required?"],
    "planning_timeframe": ["How far in advance do we need to plan?"],
    "price_range": ["Price Range", "Pricing Range"],
    "address": ["Address", "address", "Location", "location"],
}


def _resolve_column(columns: List[str], candidates: List[str]) -> str | None:
    """Find the header for a field: exact match first, then case-insensitive."""
    for name in candidates:
        if name in columns:
            return name
    by_lower = {col.lower(): col for col in columns}
    for name in candidates:
        match = by_lower.get(name.lower())
        if match is not None:
            return match
    return None


def _read_frame(source: CsvSource) -> pd.DataFrame:
    if isinstance(source, str) and "\n" in source:
        source = io.StringIO(source)
    return pd.read_csv(source, dtype=str, keep_default_na=False, skip_blank_lines=True)


def parse_restaurant_csv(source: CsvSource) -> List[RestaurantRecord]:
    """
    Parse a recommendation spreadsheet into RestaurantRecords.

    ``source`` may be a path, an open text buffer, or raw CSV text. City
    values are canonicalized on the way in and rows without a restaurant name
    are dropped.
    """
    df = _read_frame(source)
    columns = [str(c) for c in df.columns]
    resolved = {
        field: _resolve_column(columns, candidates)
        for field, candidates in COLUMN_MAPPINGS.items()
    }

    records: List[RestaurantRecord] = []
    for index, row in enumerate(df.to_dict(orient="records")):
        values = {
            field: str(row[col]).strip() if col else ""
            for field, col in resolved.items()
        }
        if not values["name"]:
            continue
        multiple = has_multiple_locations(values["city"])
        values["city"] = normalize_city(values["city"])
        records.append(RestaurantRecord(id=index, multiple_locations=multiple, **values))

    logger.info("Parsed %d restaurants from %d CSV rows", len(records), len(df))
    return records


def run_ingestion(config: IngestionConfig = DEFAULT_INGESTION_CONFIG) -> Path:
    """
    Import the configured spreadsheet and store it as the uploaded dataset.
    """
    from ..restaurants.data_store import JsonFileRepository

    records = parse_restaurant_csv(config.sample_csv_path)
    repository = JsonFileRepository(config.store_path)
    repository.save(records)
    return config.store_path


if __name__ == "__main__":
    path = run_ingestion()
    print(f"Ingestion complete. Restaurant data saved to: {path}")
