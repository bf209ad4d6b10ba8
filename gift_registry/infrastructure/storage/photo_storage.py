"""
Local storage for uploaded item photos.

Files are written under the configured upload directory with generated
names; the original file name is kept on the Photo record only.
"""

# Standard library imports
import logging
import uuid
from pathlib import Path
from typing import Iterable, Optional, Sequence

# Local application imports
from ...application.dto.item_dto import PhotoUpload
from ...core.config import get_settings
from ...domain.exceptions import StoreError, ValidationError
from ...domain.models.item import Photo
from ...utils.datetime_utils import utc_now

logger = logging.getLogger(__name__)

ALLOWED_EXTENSIONS = {".jpg", ".jpeg", ".png", ".gif", ".webp", ".bmp"}


class PhotoStorage:
    """Validates, stores and removes photo files on local disk."""

    def __init__(
        self,
        upload_dir: Optional[str] = None,
        max_mb: Optional[int] = None,
        max_files: Optional[int] = None,
    ) -> None:
        settings = get_settings()
        self.upload_dir = Path(upload_dir or settings.upload_dir)
        self.max_bytes = (max_mb or settings.upload_max_mb) * 1024 * 1024
        self.max_files = max_files or settings.upload_max_files

    def validate(self, uploads: Sequence[PhotoUpload]) -> None:
        """
        Reject the whole batch before anything is written.

        Raises:
            ValidationError: no photos, too many photos, bad type or too large
        """
        if not uploads:
            raise ValidationError("No photos uploaded")
        if len(uploads) > self.max_files:
            raise ValidationError(f"Too many photos. Max {self.max_files} per item.")

        for upload in uploads:
            if not upload.filename:
                raise ValidationError("Missing file name.")
            ext = Path(upload.filename).suffix.lower()
            if ext not in ALLOWED_EXTENSIONS:
                raise ValidationError(
                    f"Invalid image file '{upload.filename}'. Use: jpg, jpeg, png, gif, webp, bmp"
                )
            if not upload.content:
                raise ValidationError(f"Empty file '{upload.filename}'.")
            if len(upload.content) > self.max_bytes:
                raise ValidationError(
                    f"File '{upload.filename}' too large. Max {self.max_bytes // (1024 * 1024)} MB."
                )

    def save(self, upload: PhotoUpload, is_primary: bool = False) -> Photo:
        """Write one validated upload to disk and return its Photo record."""
        self.upload_dir.mkdir(parents=True, exist_ok=True)

        photo_id = uuid.uuid4().hex
        ext = Path(upload.filename).suffix.lower()
        final_path = (self.upload_dir / f"{photo_id}{ext}").resolve()
        final_path.write_bytes(upload.content)

        return Photo(
            photo_id=photo_id,
            file_path=str(final_path),
            file_name=upload.filename,
            is_primary=is_primary,
            uploaded_at=utc_now(),
        )

    def save_all(self, uploads: Sequence[PhotoUpload]) -> list[Photo]:
        """Validate then store a batch; the first photo becomes primary."""
        self.validate(uploads)
        photos: list[Photo] = []
        try:
            for index, upload in enumerate(uploads):
                photos.append(self.save(upload, is_primary=index == 0))
        except OSError as e:
            self.discard(photos)
            raise StoreError(f"Failed to store photo: {e}", operation="save_photos") from e
        return photos

    def discard(self, photos: Iterable[Photo]) -> None:
        """Remove stored files, e.g. after a failed ingestion."""
        for photo in photos:
            try:
                Path(photo.file_path).unlink(missing_ok=True)
            except OSError as e:
                logger.warning(f"Could not remove photo file {photo.file_path}: {e}")
