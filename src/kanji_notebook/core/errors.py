"""账本相关异常。

InvalidInputError 可恢复，其余都是致命错误，由命令行入口转成退出信息。
"""


class LedgerError(Exception):
    """所有账本异常的基类。"""


class ConfigurationError(LedgerError):
    """首次运行时输入的规格不是正整数。"""


class StorageCorruptedError(LedgerError):
    """账本文件存在但无法解析。"""


class StorageWriteError(LedgerError):
    """账本写盘失败，继续运行会导致内存与磁盘不一致。"""


class LedgerNotLoadedError(LedgerError):
    """账本尚未加载就被使用。"""


class InvalidInputError(LedgerError):
    """单次输入不合法，提示后继续。"""
