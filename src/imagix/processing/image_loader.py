"""图片解码。"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image, ImageOps, UnidentifiedImageError

from imagix.core.exceptions import ImageResizingError

LOGGER = logging.getLogger(__name__)


def load_image(path: Path) -> Image.Image:
    """完整解码单张图片并执行 EXIF 旋转校正。

    像素模式保持原样（16 位灰度、调色板等），PNG 无法保存的模式由写入阶段转换。
    返回值为新的 Image 对象，调用者负责关闭。
    """

    try:
        with Image.open(path) as img:
            img.load()

            # EXIF Orientation 校正
            img = ImageOps.exif_transpose(img)

            return img.copy()
    except (UnidentifiedImageError, Image.DecompressionBombError, OSError) as exc:
        LOGGER.debug("无法识别图像文件 %s: %s", path, exc)
        raise ImageResizingError(f"Failed to decode {path}: {exc}") from exc
