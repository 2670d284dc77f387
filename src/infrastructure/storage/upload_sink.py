"""Disk storage for uploaded images.

Files land under the public directory so they are served as static assets:

    public/
    ├── images/
    │   └── <user id>                     profile picture, overwritten on re-upload
    └── Posts/
        └── <user id>-<epoch ms>.<ext>    one file per post image
"""

import logging
import time
from pathlib import Path, PurePath
from uuid import UUID

import aiofiles

from core.exceptions import FileStorageError

logger = logging.getLogger(__name__)


class UploadSink:
    """Writes a single uploaded file to a fixed directory."""

    def __init__(
        self,
        root: str | Path,
        profile_image_dir: str = "images",
        post_image_dir: str = "Posts",
    ) -> None:
        self.root = Path(root)
        self.profile_image_dir = profile_image_dir
        self.post_image_dir = post_image_dir

    def profile_image_path(self, user_id: UUID) -> Path:
        """Deterministic: one picture per user, no suffix."""
        return self.root / self.profile_image_dir / str(user_id)

    def post_image_path(self, user_id: UUID, filename: str | None) -> Path:
        """Unique per submission via a millisecond timestamp."""
        extension = PurePath(filename or "").suffix
        stamp = time.time_ns() // 1_000_000
        return self.root / self.post_image_dir / f"{user_id}-{stamp}{extension}"

    async def save_profile_image(self, user_id: UUID, content: bytes) -> str:
        return await self._write(self.profile_image_path(user_id), content)

    async def save_post_image(self, user_id: UUID, filename: str | None, content: bytes) -> str:
        return await self._write(self.post_image_path(user_id, filename), content)

    async def _write(self, path: Path, content: bytes) -> str:
        """Write ``content`` to ``path`` and return the path as stored on aggregates."""
        try:
            path.parent.mkdir(parents=True, exist_ok=True)
            async with aiofiles.open(path, "wb") as f:
                await f.write(content)
        except OSError as e:
            logger.error("Failed to store upload at %s: %s", path, e)
            raise FileStorageError() from e

        logger.info("Stored upload %s (%d bytes)", path, len(content))
        return path.as_posix()
