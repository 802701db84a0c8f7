"""
Lofi Records Services Package

Usage:
    from lofi_records.services import AlbumService

    service = AlbumService.from_flask_config(current_app.config)
    albums = service.list_albums()
"""

from lofi_records.services.album_service import (
    AlbumService,
    NOT_CONFIGURED_MESSAGE,
)

__all__ = [
    "AlbumService",
    "NOT_CONFIGURED_MESSAGE",
]
