"""项目内使用的自定义异常定义。"""


class ImagixError(Exception):
    """基础异常类型，``str(exc)`` 即面向用户的提示信息。"""


class FileIOError(ImagixError):
    """文件系统访问、目录创建或写入失败。"""


class UserInputError(ImagixError):
    """用户输入的参数、文件格式或源目录不合法。"""


class ImageResizingError(ImagixError):
    """图像解码或编码失败。"""


class FormatError(ImagixError):
    """内部格式化失败。"""
