"""命令行入口。"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import NoReturn, Optional

import typer
from rich.console import Console
from rich.progress import (
    BarColumn,
    Progress,
    SpinnerColumn,
    TextColumn,
    TimeElapsedColumn,
    TimeRemainingColumn,
)

from imagix.core.config import ResizeJob
from imagix.core.exceptions import (
    FileIOError,
    ImageResizingError,
    ImagixError,
    UserInputError,
)
from imagix.core.models import ProgressUpdate
from imagix.core.options import Mode, SizeOption
from imagix.core.stats import get_stats
from imagix.processing.pipeline import process_resize_request
from imagix.utils.logging import setup_logging

# sysexits.h 中的 EX_USAGE
EXIT_USAGE = 64

app = typer.Typer(help="This is a tool for image resizing and stats")


@app.callback()
def main(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="输出调试日志"),
) -> None:
    setup_logging(verbose)


def _fail(message: str) -> NoReturn:
    typer.echo(message, err=True)
    raise typer.Exit(code=EXIT_USAGE)


def _require_value(value: str) -> str:
    if not value:
        raise typer.BadParameter("值不能为空")
    return value


def _parse_options(size: str, mode: str) -> tuple[SizeOption, Mode]:
    try:
        return SizeOption.parse(size), Mode.parse(mode)
    except UserInputError as exc:
        _fail(str(exc))
    except ImagixError:
        _fail("An unknown error occurred")


def _build_progress_callback(progress: Progress):
    task_id: Optional[int] = None

    def callback(update: ProgressUpdate) -> None:
        nonlocal task_id
        if update.total == 0:
            return
        if task_id is None:
            task_id = progress.add_task("缩放图片", total=update.total)
        progress.update(task_id, completed=update.completed)
        if update.message:
            progress.log(update.message)

    return callback


@app.command("resize")
def resize_cli(
    size: str = typer.Option(..., "--size", callback=_require_value, help="small / medium / large"),
    mode: str = typer.Option(..., "--mode", callback=_require_value, help="single / all"),
    srcfolder: str = typer.Option(
        ..., "--srcfolder", callback=_require_value, help="源图片文件（single）或目录（all）"
    ),
) -> None:
    """Resizes provided image(-s).

    Specify size (small/medium/large), mode (single/all) and srcfolder.
    """

    size_option, mode_option = _parse_options(size, mode)
    job = ResizeJob(size=size_option, mode=mode_option, source=Path(srcfolder))
    logging.getLogger(__name__).debug("CLI 参数解析完成: %s", job)

    try:
        if mode_option is Mode.ALL:
            progress = Progress(
                SpinnerColumn(),
                TextColumn("[bold blue]{task.description}"),
                BarColumn(),
                TimeElapsedColumn(),
                TimeRemainingColumn(),
                console=Console(stderr=True),
                transient=True,
            )
            with progress:
                process_resize_request(job, progress_callback=_build_progress_callback(progress))
        else:
            process_resize_request(job)
    except (FileIOError, UserInputError, ImageResizingError) as exc:
        _fail(str(exc))
    except ImagixError as exc:
        _fail(f"Error in processing: {exc}")

    typer.echo("Image resized successfully")


@app.command("stats")
def stats_cli(
    srcfolder: Path = typer.Option(..., "--srcfolder", help="图片目录"),
) -> None:
    """Provides statistics on image(-s)."""

    # 统计失败时输出到 stdout，退出码保持为 0。
    try:
        stats = get_stats(srcfolder)
    except (FileIOError, UserInputError) as exc:
        typer.echo(str(exc))
        return
    except ImagixError as exc:
        typer.echo(f"Error in processing: {exc}")
        return

    typer.echo(f"Found {stats.count} image files with aggregate size of {stats.size_mb} MB")


if __name__ == "__main__":
    app()
