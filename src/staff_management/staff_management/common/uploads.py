from __future__ import annotations

import logging
from typing import Optional

from werkzeug.datastructures import FileStorage

from ..files.service import FileService

logger = logging.getLogger(__name__)


def has_upload(file: Optional[FileStorage]) -> bool:
    return bool(file and file.filename)


def image_for_create(file: Optional[FileStorage], files: FileService, directory: str) -> Optional[str]:
    if not has_upload(file):
        return None
    return files.upload(file, directory)


def image_for_update(
    file: Optional[FileStorage],
    files: FileService,
    directory: str,
    *,
    current_path: Optional[str],
    entity_id: int,
) -> Optional[str]:
    """Image path to store on an edited record.

    Without a new upload the current path is carried forward, so a
    full-replace update keeps the image. The replaced file is not removed
    here; see ``settle_replaced_image``.
    """

    if has_upload(file):
        new_path = files.upload(file, directory)
        logger.info("New image uploaded for %s %s: %s", directory, entity_id, new_path)
        return new_path

    logger.info("Preserving existing image for %s %s: %s", directory, entity_id, current_path)
    return current_path


def settle_replaced_image(files: FileService, *, old_path: Optional[str], new_path: Optional[str], saved: bool) -> None:
    """Drop whichever image lost: the old one after a save, the new one after a rejected save."""

    if new_path == old_path:
        return
    if saved:
        files.delete(old_path)
    else:
        files.delete(new_path)
