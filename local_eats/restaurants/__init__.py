"""
Restaurant dataset package.

Responsibilities:
- Define the canonical RestaurantRecord / RestaurantGroup schema.
- Group recommendations for the same restaurant under one entry.
- Resolve the active dataset from uploaded data or the bundled sample CSV.
"""
