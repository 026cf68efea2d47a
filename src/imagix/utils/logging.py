"""日志初始化。"""

from __future__ import annotations

import logging

# Pillow 在 DEBUG 级别会逐块输出 PNG/JPEG 解析细节
NOISY_LOGGERS = ("PIL",)


def setup_logging(verbose: bool = False) -> None:
    """初始化项目日志配置，``verbose`` 时输出 imagix 自身的调试日志。"""

    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    for name in NOISY_LOGGERS:
        logging.getLogger(name).setLevel(logging.INFO)
