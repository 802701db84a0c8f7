"""
Lofi Records Models Package.

Exports the Album and Track dataclasses built from a bucket listing.

Usage:
    from lofi_records.models import Album, Track
"""

from lofi_records.models.album import Album, Track, UNKNOWN_ARTIST

__all__ = [
    "Album",
    "Track",
    "UNKNOWN_ARTIST",
]
