"""图片目录统计。"""

from __future__ import annotations

import logging
from pathlib import Path

from imagix.core.exceptions import FileIOError
from imagix.core.models import ImageStats
from imagix.core.scanner import get_image_files

LOGGER = logging.getLogger(__name__)

BYTES_PER_MB = 1_000_000


def get_stats(src_folder: Path) -> ImageStats:
    """统计目录下一层图片的数量与总大小（整数 MB）。"""

    images = get_image_files(src_folder)
    total_bytes = 0
    for image_path in images:
        try:
            total_bytes += image_path.stat().st_size
        except OSError as exc:
            raise FileIOError(str(exc)) from exc

    LOGGER.debug("统计 %s: %d 个文件, %d 字节", src_folder, len(images), total_bytes)
    return ImageStats(count=len(images), size_mb=float(total_bytes // BYTES_PER_MB))
