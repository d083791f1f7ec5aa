# clean_polylines/__init__.py
from .polyline_cleaning import clean_polylines
from .types import CleaningStats, PolylineCleaningContext

__all__ = [
    # Polyline cleaning
    "clean_polylines",
    # Data types
    "PolylineCleaningContext",
    "CleaningStats",
]
