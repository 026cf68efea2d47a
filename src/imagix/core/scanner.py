"""文件扫描与筛选逻辑。"""

from __future__ import annotations

import logging
from pathlib import Path

from imagix.core.exceptions import UserInputError

LOGGER = logging.getLogger(__name__)

# 按字面量区分大小写：``Jpg``、``jPg`` 之类的混合写法不会被匹配。
IMAGE_EXTENSIONS = frozenset({".JPG", ".jpg", ".PNG", ".png"})


def has_image_extension(path: Path) -> bool:
    return path.suffix in IMAGE_EXTENSIONS


def get_image_files(src_folder: Path) -> list[Path]:
    """列出目录下一层的图片文件，顺序取决于文件系统。"""

    try:
        entries = list(src_folder.iterdir())
    except OSError as exc:
        LOGGER.debug("无法读取目录 %s: %s", src_folder, exc)
        raise UserInputError("Invalid source folder") from exc

    images = [entry for entry in entries if has_image_extension(entry)]
    LOGGER.debug("目录 %s 中发现 %d 个候选图片", src_folder, len(images))
    return images
