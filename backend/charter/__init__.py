"""
Charter operations backend.

Companies register planes and pilots and schedule trips between airports.
The backend resolves airport coordinates from a static reference table,
estimates fuel and total cost for each trip, and serves everything to the
map dashboard over a JSON REST API.
"""

__version__ = "0.1.0"
