"""尺寸与处理模式选项。"""

from __future__ import annotations

from enum import Enum

from imagix.core.exceptions import UserInputError


class SizeOption(Enum):
    """缩略图尺寸档位，值为边界框的像素边长。"""

    SMALL = 200
    MEDIUM = 400
    LARGE = 800

    @classmethod
    def parse(cls, token: str) -> "SizeOption":
        """严格匹配小写字面量，不做裁剪与大小写归一。"""

        try:
            return _SIZE_TOKENS[token]
        except KeyError:
            raise UserInputError("Wrong value for size") from None

    @property
    def pixels(self) -> int:
        return self.value


class Mode(Enum):
    """处理模式：单个文件或整个目录。"""

    SINGLE = "single"
    ALL = "all"

    @classmethod
    def parse(cls, token: str) -> "Mode":
        try:
            return _MODE_TOKENS[token]
        except KeyError:
            raise UserInputError("Wrong value for mode") from None


_SIZE_TOKENS = {
    "small": SizeOption.SMALL,
    "medium": SizeOption.MEDIUM,
    "large": SizeOption.LARGE,
}

_MODE_TOKENS = {mode.value: mode for mode in Mode}
