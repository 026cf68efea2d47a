"""核心数据模型定义。"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Optional


@dataclass(slots=True)
class ThumbnailResult:
    """单张缩略图的处理结果，仅用于报告。"""

    source_path: Path
    output_path: Path
    bound: int
    size: tuple[int, int]
    elapsed_ns: int


@dataclass(slots=True)
class ImageStats:
    """目录内图片的统计信息。"""

    count: int
    size_mb: float


@dataclass(slots=True)
class ProgressUpdate:
    """目录模式处理过程中的进度信息。"""

    total: int
    completed: int
    message: Optional[str] = None
