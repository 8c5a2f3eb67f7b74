"""输入文本的规范化与校验。"""

from __future__ import annotations

from .errors import ConfigurationError, InvalidInputError


def normalize_kanji(text: str) -> str:
    """去掉首尾空白后必须恰好是一个字符（按码位计，不按字节）。"""

    kanji = text.strip() if text else ""
    if len(kanji) != 1:
        raise InvalidInputError(f"expected exactly one character, got {kanji!r}")
    try:
        kanji.encode("utf-8")
    except UnicodeEncodeError as exc:
        raise InvalidInputError(f"character cannot be stored: {kanji!r}") from exc
    return kanji


def parse_positive_int(text: str, name: str) -> int:
    """解析无符号十进制整数，0 也视为非法。"""

    value = text.strip() if text else ""
    if not value.isdecimal():
        raise ConfigurationError(f"{name} must be a positive integer, got {value!r}")
    number = int(value)
    if number == 0:
        raise ConfigurationError(f"{name} must be greater than zero")
    return number
