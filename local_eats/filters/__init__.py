"""
Cascading filter package.

Responsibilities:
- Hold the user's filter selection as an immutable FilterState.
- Derive the valid options for each filter dimension from the dataset.
- Apply the selection to grouped restaurants and cascade invalidations.
"""
