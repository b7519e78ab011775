"""
Address and price lookups.

Responsibilities:
- Query Google Places for a restaurant's address and price level.
- Cache results per restaurant so repeat views never hit the API.
- Degrade to a status-only result when the API key is missing or a call fails.
"""
