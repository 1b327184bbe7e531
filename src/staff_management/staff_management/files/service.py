from __future__ import annotations

import io
import logging
import uuid
from pathlib import Path, PurePosixPath
from typing import Optional

from PIL import Image, UnidentifiedImageError
from werkzeug.datastructures import FileStorage

from ..core.constants import ALLOWED_IMAGE_EXTENSIONS, NORMALIZED_IMAGE_EXTENSION, UPLOADS_BASE_DIRECTORY
from ..core.exceptions import ValidationError

logger = logging.getLogger(__name__)


class FileService:
    """Stores uploaded images under ``<upload_root>/uploads/<directory>/``.

    Every accepted image is decoded with Pillow and saved as JPEG under a
    random name, so stored paths never carry client file names. Paths handed
    back are relative to ``upload_root`` (the static folder in the web app).
    """

    def __init__(self, upload_root: str | Path):
        self._root = Path(upload_root).resolve()

    @property
    def root(self) -> Path:
        return self._root

    def upload(self, file: Optional[FileStorage], directory: str) -> str:
        if file is None or not file.filename:
            raise ValidationError("No file was provided")

        extension = PurePosixPath(file.filename).suffix.lower()
        if extension not in ALLOWED_IMAGE_EXTENSIONS:
            raise ValidationError(
                f"File type {extension or '(none)'} is not allowed. Allowed types: {', '.join(ALLOWED_IMAGE_EXTENSIONS)}"
            )

        data = file.read()
        if not data:
            raise ValidationError("No file was provided")

        try:
            img = Image.open(io.BytesIO(data)).convert("RGB")
        except (UnidentifiedImageError, OSError) as e:
            raise ValidationError("Uploaded file is not a readable image") from e

        target_dir = self._root / UPLOADS_BASE_DIRECTORY / directory
        target_dir.mkdir(parents=True, exist_ok=True)
        file_name = f"{uuid.uuid4()}{NORMALIZED_IMAGE_EXTENSION}"
        img.save(target_dir / file_name, format="JPEG")

        relative = str(PurePosixPath(UPLOADS_BASE_DIRECTORY, directory, file_name))
        logger.info("File uploaded: %s", relative)
        return relative

    def delete(self, relative_path: Optional[str]) -> None:
        if not relative_path:
            return

        full_path = (self._root / relative_path).resolve()
        if self._root not in full_path.parents:
            raise ValidationError(f"Refusing to delete outside the upload root: {relative_path}")

        if full_path.is_file():
            full_path.unlink()
            logger.info("File deleted: %s", relative_path)
        else:
            logger.warning("File not found for deletion: %s", relative_path)
