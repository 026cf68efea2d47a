"""缩略图生成：格式校验、解码、等比缩小与 PNG 输出。"""

from __future__ import annotations

import logging
import time
from pathlib import Path

from PIL import Image

from imagix.core.exceptions import UserInputError
from imagix.core.models import ThumbnailResult
from imagix.core.output_manager import destination_for, ensure_dest_dir, save_image
from imagix.core.scanner import has_image_extension
from imagix.processing.image_loader import load_image
from imagix.utils.timing import format_elapsed

_RESAMPLING = getattr(Image, "Resampling", Image)

LOGGER = logging.getLogger(__name__)


def resize_image(size: int, source: Path) -> ThumbnailResult:
    """将 ``source`` 缩小到 ``size`` x ``size`` 边界框内并写入 ``tmp/<stem>.png``。

    只缩小不放大，保持宽高比。扩展名不合法时在创建任何输出之前失败。
    """

    if not has_image_extension(source):
        raise UserInputError("Invalid file format")

    destination = destination_for(source)
    ensure_dest_dir(source)

    started = time.perf_counter_ns()
    image = load_image(source)
    try:
        image.thumbnail((size, size), _RESAMPLING.LANCZOS)
        save_image(image, destination)
        dimensions = image.size
    finally:
        image.close()
    elapsed_ns = time.perf_counter_ns() - started

    LOGGER.info(
        "Thumbnailed file: %s to size %dx%d in %s. Output file in %s",
        source,
        size,
        size,
        format_elapsed(elapsed_ns),
        destination,
    )
    return ThumbnailResult(
        source_path=source,
        output_path=destination,
        bound=size,
        size=dimensions,
        elapsed_ns=elapsed_ns,
    )
