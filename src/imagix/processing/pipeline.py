"""缩放流程编排：源路径校验、单文件与目录模式分派。"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Callable, Optional

from imagix.core.config import ResizeJob
from imagix.core.exceptions import FileIOError
from imagix.core.models import ProgressUpdate, ThumbnailResult
from imagix.core.options import Mode
from imagix.core.scanner import get_image_files
from imagix.processing.thumbnail import resize_image

LOGGER = logging.getLogger(__name__)


ProgressCallback = Optional[Callable[[ProgressUpdate], None]]


def process_resize_request(job: ResizeJob, progress_callback: ProgressCallback = None) -> list[ThumbnailResult]:
    """缩放入口：校验源路径存在后按模式处理。

    目录模式下遇到第一个失败即中止并向上抛出，已生成的缩略图保留在磁盘上。
    """

    _ensure_exists(job.source)

    if job.mode is Mode.SINGLE:
        return [resize_image(job.bound, job.source)]
    return _resize_all(job.bound, job.source, progress_callback)


def _ensure_exists(source: Path) -> None:
    # 无法确认存在（包括 stat 失败）一律视为不存在。
    try:
        source.stat()
    except OSError as exc:
        raise FileIOError("No such file or directory") from exc


def _resize_all(size: int, src_folder: Path, progress_callback: ProgressCallback) -> list[ThumbnailResult]:
    entries = get_image_files(src_folder)
    total = len(entries)
    LOGGER.info("发现 %d 个候选图片文件", total)

    results: list[ThumbnailResult] = []
    _emit_progress(progress_callback, 0, total, "开始处理")
    for entry in entries:
        results.append(resize_image(size, entry))
        _emit_progress(progress_callback, len(results), total, f"完成 {entry.name}")
    return results


def _emit_progress(
    callback: ProgressCallback,
    completed: int,
    total: int,
    message: Optional[str] = None,
) -> None:
    if not callback:
        return
    callback(ProgressUpdate(total=total, completed=completed, message=message))
