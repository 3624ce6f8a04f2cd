"""
Venue seat normalizer.

Resolves free-form ticket section/row text to canonical ids from a venue manifest.
"""
