"""
Album routes: list every album with randomized track order.
"""

import logging
from datetime import datetime, timezone

from flask import current_app

from lofi_records.routes import main, json_success
from lofi_records.services import AlbumService

logger = logging.getLogger(__name__)


@main.route("/albums", methods=["GET"])
def list_albums():
    """Return all albums under the configured prefix."""
    logger.info(
        "[%s] /albums endpoint hit - will randomize track order for all albums",
        datetime.now(timezone.utc).isoformat(),
    )

    album_service = AlbumService.from_flask_config(current_app.config)
    albums = album_service.list_albums()

    return json_success(
        albums=[album.to_dict() for album in albums],
        count=len(albums),
    )
