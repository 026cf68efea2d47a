"""处理任务的配置模型。"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from imagix.core.options import Mode, SizeOption

# 输出位置与格式固定，不开放配置。
DEST_DIR_NAME = "tmp"
OUTPUT_FORMAT = "PNG"
OUTPUT_SUFFIX = ".png"


@dataclass(frozen=True, slots=True)
class ResizeJob:
    """单次缩放请求。"""

    size: SizeOption
    mode: Mode
    source: Path

    @property
    def bound(self) -> int:
        """缩略图边界框的像素边长。"""

        return self.size.pixels
