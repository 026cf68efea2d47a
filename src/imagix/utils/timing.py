"""耗时格式化工具。"""

from __future__ import annotations

from imagix.core.exceptions import FormatError

NANOS_PER_SECOND = 1_000_000_000


def format_elapsed(elapsed_ns: int) -> str:
    """将纳秒耗时格式化为 ns/µs/ms/s 文本。

    拆分为整秒 ``s`` 与秒内纳秒 ``n`` 后按档位输出；1~9 秒保留两位小数，
    10 秒及以上只输出整秒。
    """

    if elapsed_ns < 0:
        raise FormatError(f"Negative duration: {elapsed_ns} ns")

    seconds, nanos = divmod(elapsed_ns, NANOS_PER_SECOND)
    if seconds == 0:
        if nanos < 1_000:
            return f"{nanos} ns"
        if nanos < 1_000_000:
            return f"{nanos // 1_000} µs"
        return f"{nanos // 1_000_000} ms"
    if seconds < 10:
        return f"{seconds}.{nanos // 10_000_000:02d} s"
    return f"{seconds} s"
