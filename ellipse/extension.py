"""
字符串扩展：让字符串对象自身具备 .truncate_ellipse() 能力。

Python 无法给内置 str 追加方法，这里提供：
- Ellipse：约定 truncate_ellipse_with / truncate_ellipse 两个入口的混入类；
- EllipseStr：str 的子类，实现上述约定，可直接当普通字符串使用。
"""

from __future__ import annotations

from ellipse.truncation import DEFAULT_ELLIPSE, truncate_ellipse_with


class Ellipse:
    """
    以人类友好的方式截断并追加省略标记。

    子类只需实现 truncate_ellipse_with；truncate_ellipse 默认使用 "..."。
    """

    __slots__ = ()

    def truncate_ellipse_with(self, length: int, ellipse: str) -> str:
        raise NotImplementedError

    def truncate_ellipse(self, length: int) -> str:
        """
        截断到 length 个扩展字形簇，截断时追加 "..."；截断到 0 时返回空值，不带省略号。
        """

        return self.truncate_ellipse_with(length, DEFAULT_ELLIPSE)


class EllipseStr(str, Ellipse):
    """
    支持字形簇截断的 str。

    >>> EllipseStr("🇩🇪🇬🇧🇮🇹🇫🇷").truncate_ellipse(2)
    '🇩🇪🇬🇧...'
    """

    __slots__ = ()

    def truncate_ellipse_with(self, length: int, ellipse: str) -> EllipseStr:
        out = truncate_ellipse_with(self, length, ellipse)
        if out is self:
            return self
        return EllipseStr(out)
