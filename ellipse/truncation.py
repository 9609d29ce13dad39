"""
截断工具：按“用户感知的字符”（扩展字形簇）截断文本并追加省略标记。

规则：
1. 字形簇数量 <= length：原样返回传入的 str 对象，不复制、不追加标记；
2. length == 0：返回空串，且不追加标记（截断到 0 就是“什么都没有”）；
3. 其余情况：取前 length 个字形簇，再拼接标记自身的字形簇。
"""

from __future__ import annotations

import logging
import operator
from itertools import chain

from ellipse.utils.segmentation import graphemes, take_graphemes

logger = logging.getLogger(__name__)

DEFAULT_ELLIPSE = "..."


def _check_length(length: int) -> int:
    """
    校验截断长度：必须为非负整数。

    Python 没有无符号整数类型，因此在调用边界显式拒绝负数，而不是静默兜底。
    """

    if isinstance(length, bool):
        raise TypeError("length 必须是整数，不能是 bool")
    try:
        n = operator.index(length)
    except TypeError as e:
        raise TypeError(f"length 必须是整数，但实际为: {type(length).__name__}") from e
    if n < 0:
        raise ValueError(f"length 不能为负数: {n}")
    return n


def _check_str(name: str, value: str) -> None:
    if not isinstance(value, str):
        raise TypeError(f"{name} 必须是 str，但实际为: {type(value).__name__}")


def truncate_ellipse_with(text: str, length: int, ellipse: str) -> str:
    """
    截断到 length 个扩展字形簇，发生截断时在末尾追加 ellipse。

    说明：
    - 截断到 0 个字形簇时返回空串，不附带 ellipse；
    - 无需截断时返回的就是 text 本身（同一对象）；
    - ellipse 同样按字形簇处理，多码点的标记（如国旗）不会被破坏。
    """

    _check_str("text", text)
    _check_str("ellipse", ellipse)
    n = _check_length(length)

    # 字形簇数量不会超过码点数量
    if n >= len(text):
        return text

    # 只需多看一个簇即可判断是否超长
    head = take_graphemes(text, n + 1)
    if len(head) <= n:
        return text
    if n == 0:
        logger.debug("truncate to zero graphemes, ellipse dropped")
        return ""

    logger.debug("truncate to %d graphemes, ellipse=%r", n, ellipse)
    return "".join(chain(head[:n], graphemes(ellipse)))


def truncate_ellipse(text: str, length: int) -> str:
    """
    截断到 length 个扩展字形簇，发生截断时在末尾追加 "..."。

    截断到 0 个字形簇时返回空串，不附带省略号。
    """

    return truncate_ellipse_with(text, length, DEFAULT_ELLIPSE)
