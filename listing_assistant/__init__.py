"""
Listing assistant - completeness scoring and AI-assisted suggestions
for marketplace listings.
"""

__version__ = "2.0.0"
