"""
CSV import for recommendation spreadsheets.

Responsibilities:
- Read a spreadsheet export (Google Form / Sheets CSV).
- Map its question-style headers onto the RestaurantRecord schema.
- Persist the imported records as the active uploaded dataset.
"""
