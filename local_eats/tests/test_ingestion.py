import io
import json
from pathlib import Path

from local_eats.data_ingestion.config import IngestionConfig
from local_eats.data_ingestion.ingest import parse_restaurant_csv, run_ingestion

ALTERNATE_HEADERS_CSV = (
    "Restaurant name,City:,Neighborhood/Area,cuisine type,Pricing Range,"
    "Reservation needed/required?,Location\n"
    'Cafe A,"San Francisco, CA",Mission,Thai,$$, Just pull up! ,1 Main St\n'
    ",Oakland,Temescal,Indian,$,,\n"
    "Cafe B,NYC,SoHo,Italian,,,\n"
)


def test_parse_maps_alternate_headers():
    records = parse_restaurant_csv(io.StringIO(ALTERNATE_HEADERS_CSV))
    assert [r.name for r in records] == ["Cafe A", "Cafe B"]

    cafe_a = records[0]
    assert cafe_a.city == "San Francisco"
    assert cafe_a.neighborhood == "Mission"
    assert cafe_a.cuisine_type == "Thai"
    assert cafe_a.price_range == "$$"
    assert cafe_a.reservation_needed == "Just pull up!"
    assert cafe_a.address == "1 Main St"
    assert cafe_a.website == ""

    assert records[1].city == "New York City"
    assert records[1].price_range == ""


def test_parse_accepts_raw_text():
    records = parse_restaurant_csv(ALTERNATE_HEADERS_CSV)
    assert len(records) == 2


def test_bundled_sample_parses(tmp_path: Path):
    cfg = IngestionConfig(data_dir=tmp_path)
    records = parse_restaurant_csv(cfg.sample_csv_path)
    assert len(records) == 12
    assert {r.city for r in records} == {
        "Berkeley", "New York City", "Oakland", "Reno", "San Francisco",
    }


def test_run_ingestion_writes_upload_store(tmp_path: Path):
    cfg = IngestionConfig(data_dir=tmp_path / "store")

    output_path = run_ingestion(config=cfg)

    assert output_path.is_file(), "Upload store should be created"
    payload = json.loads(output_path.read_text(encoding="utf-8"))
    assert payload["count"] == 12
    assert payload["updatedAt"]
    assert "cuisineType" in payload["restaurants"][0]


def test_parse_keeps_multiple_locations_flag():
    records = parse_restaurant_csv(
        "Restaurant Name,City\n"
        'Cafe A,"Oakland, CA (multiple locations)"\n'
        "Cafe B,Oakland\n"
    )
    assert [r.city for r in records] == ["Oakland", "Oakland"]
    assert [r.multiple_locations for r in records] == [True, False]
