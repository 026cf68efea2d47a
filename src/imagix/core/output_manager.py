"""输出目录、文件命名与 PNG 写入。"""

from __future__ import annotations

import logging
from pathlib import Path

from PIL import Image

from imagix.core.config import DEST_DIR_NAME, OUTPUT_FORMAT, OUTPUT_SUFFIX
from imagix.core.exceptions import FileIOError, ImageResizingError

LOGGER = logging.getLogger(__name__)

# PNG 可直接保存的模式；CMYK 等其余模式写入前转为 RGB。
PNG_MODES = {"1", "L", "LA", "I", "I;16", "I;16B", "P", "RGB", "RGBA"}


def destination_for(source: Path) -> Path:
    """``<源文件目录>/tmp/<同名>.png``，与源格式无关。"""

    return source.parent / DEST_DIR_NAME / f"{source.stem}{OUTPUT_SUFFIX}"


def ensure_dest_dir(source: Path) -> Path:
    """在源文件所在目录下创建 tmp 目录，已存在时直接复用。"""

    dest_dir = source.parent / DEST_DIR_NAME
    if dest_dir.exists():
        return dest_dir

    try:
        dest_dir.mkdir()
    except FileExistsError:
        pass
    except OSError as exc:
        raise FileIOError(str(exc)) from exc
    else:
        LOGGER.debug("创建输出目录 %s", dest_dir)
    return dest_dir


def save_image(image: Image.Image, destination: Path) -> None:
    """以 PNG 格式写入目标文件（存在则覆盖）。"""

    image_to_save = image
    if image.mode not in PNG_MODES:
        image_to_save = image.convert("RGB")

    try:
        handle = destination.open("wb")
    except OSError as exc:
        raise FileIOError(str(exc)) from exc

    with handle:
        try:
            image_to_save.save(handle, format=OUTPUT_FORMAT, optimize=True)
        except (OSError, ValueError) as exc:
            raise ImageResizingError(f"Failed to encode {destination}: {exc}") from exc
