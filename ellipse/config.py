"""
截断配置：把常用的省略标记固定在一个不可变对象里，随处复用。

只在内存中使用，不读取文件或环境变量。
"""

from __future__ import annotations

from dataclasses import dataclass

from ellipse.truncation import DEFAULT_ELLIPSE, truncate_ellipse_with


@dataclass(frozen=True)
class EllipseConfig:
    """
    截断配置。

    ellipse：发生截断时追加的标记，默认 "..."。
    """

    ellipse: str = DEFAULT_ELLIPSE

    def truncate(self, text: str, length: int) -> str:
        return truncate_ellipse_with(text, length, self.ellipse)
