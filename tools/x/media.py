"""
Media pipeline — validate a local image/video file, then upload it to X.
"""

import asyncio
import stat
from dataclasses import dataclass
from enum import Enum
from pathlib import Path

import structlog

from config import LONG_VIDEO_THRESHOLD, MIB
from tools.x.exceptions import (
    MediaNotFoundError,
    MediaTooLargeError,
    MediaUploadError,
    MediaValidationError,
    UnsupportedMediaFormatError,
    XToolError,
)

logger = structlog.get_logger()


class MediaClass(str, Enum):
    IMAGE = "image"
    VIDEO = "video"


# Extension -> MIME type, in the order they are listed to the user
IMAGE_TYPES = {
    "png": "image/png",
    "jpg": "image/jpeg",
    "jpeg": "image/jpeg",
    "gif": "image/gif",
    "webp": "image/webp",
}

VIDEO_TYPES = {
    "mp4": "video/mp4",
    "mov": "video/quicktime",
    "avi": "video/x-msvideo",
    "webm": "video/webm",
    "m4v": "video/x-m4v",
}

# Per-class rules: (mime table, max bytes, size-error label, format-error label)
MEDIA_RULES = {
    MediaClass.IMAGE: (IMAGE_TYPES, 5 * MIB, "File size exceeds 5MB limit", "file"),
    MediaClass.VIDEO: (VIDEO_TYPES, 512 * MIB, "Video size exceeds 512MB limit", "video"),
}


@dataclass(frozen=True)
class MediaFile:
    path: Path
    size: int
    extension: str
    mime_type: str
    media_class: MediaClass

    @property
    def is_long_video(self) -> bool:
        return self.media_class is MediaClass.VIDEO and self.size > LONG_VIDEO_THRESHOLD


def validate_media(path: str, media_class: MediaClass) -> MediaFile:
    """
    Check that a media file exists, fits the size limit, and has a supported extension.

    The path is resolved to an absolute form first; the resolved path is the
    one that gets uploaded. File content is never inspected, the extension
    decides the MIME type.

    Raises:
        MediaNotFoundError: Missing path, or not a regular file.
        MediaTooLargeError: File exceeds the class size ceiling.
        UnsupportedMediaFormatError: Extension missing or not supported.
    """
    types, max_size, size_label, format_label = MEDIA_RULES[media_class]
    resolved = Path(path).expanduser().resolve()

    try:
        st = resolved.stat()
    except OSError as e:
        raise MediaNotFoundError(f"File not found: {resolved.name}") from e

    if not stat.S_ISREG(st.st_mode):
        raise MediaNotFoundError(f"Path is not a file: {resolved.name}")

    if st.st_size > max_size:
        raise MediaTooLargeError(f"{size_label} ({st.st_size / MIB:.2f}MB)")

    ext = resolved.suffix.lower().lstrip(".")
    if ext not in types:
        supported = ", ".join(types)
        raise UnsupportedMediaFormatError(
            f"Unsupported {format_label} format. Supported formats: {supported}"
        )

    return MediaFile(
        path=resolved,
        size=st.st_size,
        extension=ext,
        mime_type=types[ext],
        media_class=media_class,
    )


async def upload_media(client, media: MediaFile) -> str:
    """
    Read a validated media file and upload it, returning the media ID.

    Raises:
        MediaUploadError: If reading the file or the remote upload fails,
            including a malformed upload response.
    """
    try:
        data = await asyncio.to_thread(media.path.read_bytes)
        media_id = await client.upload_media(
            data, media.mime_type, long_video=media.is_long_video
        )
    except XToolError:
        raise
    except Exception as e:
        raise MediaUploadError(str(e) or type(e).__name__) from e

    logger.info(
        "Media uploaded",
        media_class=media.media_class.value,
        mime_type=media.mime_type,
        size=media.size,
        long_video=media.is_long_video,
    )
    return media_id


async def attach_media(client, image_path: str | None, video_path: str | None) -> str | None:
    """Validate and upload whichever attachment is given. Returns None if neither."""
    if image_path:
        path, media_class = image_path, MediaClass.IMAGE
    elif video_path:
        path, media_class = video_path, MediaClass.VIDEO
    else:
        return None

    try:
        media = validate_media(path, media_class)
        return await upload_media(client, media)
    except (MediaValidationError, MediaUploadError) as e:
        raise type(e)(f"Failed to upload {media_class.value}: {e}") from e
