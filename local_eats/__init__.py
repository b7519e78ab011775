"""
Local Eats & Treats: friend-sourced restaurant recommendations.

Loads recommendation spreadsheets, reconciles their free-text city,
neighborhood and cuisine fields into consistent filter facets, and serves
cascading filters over the grouped restaurants.
"""

__version__ = "1.0.0"
