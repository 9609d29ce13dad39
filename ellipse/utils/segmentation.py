"""
字形簇切分工具（extended grapheme cluster，UAX #29）。

说明：
- Python 的 str 按码点(code point)计数，国旗、肤色修饰、ZWJ 组合表情、
  带组合附加符号的字母等都会被拆成多个“字符”；
- 这里统一使用第三方 regex 库的 \\X 匹配扩展字形簇，不自行实现断字规则，
  以便跟随 Unicode 标准的版本更新。
"""

from __future__ import annotations

from itertools import islice
from collections.abc import Iterator

import regex

_GRAPHEME_RE = regex.compile(r"\X")


def graphemes(text: str) -> Iterator[str]:
    """
    按顺序惰性产出 text 的扩展字形簇。

    所有簇首尾相接即为原文，既不重叠也无空隙。
    """

    for m in _GRAPHEME_RE.finditer(text):
        yield m.group()


def grapheme_count(text: str) -> int:
    """
    统计 text 中扩展字形簇的数量（即“用户感知的字符数”）。
    """

    return sum(1 for _ in graphemes(text))


def take_graphemes(text: str, limit: int) -> list[str]:
    """
    取出 text 开头至多 limit 个字形簇。
    """

    return list(islice(graphemes(text), limit))
