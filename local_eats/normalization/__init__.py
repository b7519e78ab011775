"""
Text normalization layer.

Responsibilities:
- Measure edit distance between free-text values and decide near-duplicates.
- Canonicalize city names into stable filter facets.
- Split compound cuisine / neighborhood fields into tokens.
- Collapse near-duplicate tokens into one representative label each.
"""
