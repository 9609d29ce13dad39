"""
ellipse 包

以人类友好的方式截断字符串：按扩展字形簇（用户感知的字符）计数，
截断时在末尾追加省略标记，绝不把国旗、组合表情等拆成半个字符。

    >>> from ellipse import truncate_ellipse
    >>> truncate_ellipse("🇩🇪🇬🇧🇮🇹🇫🇷", 2)
    '🇩🇪🇬🇧...'
"""

from ellipse.config import EllipseConfig
from ellipse.extension import Ellipse, EllipseStr
from ellipse.truncation import DEFAULT_ELLIPSE, truncate_ellipse, truncate_ellipse_with
from ellipse.utils.segmentation import grapheme_count, graphemes

__all__ = [
    "__version__",
    "DEFAULT_ELLIPSE",
    "Ellipse",
    "EllipseConfig",
    "EllipseStr",
    "grapheme_count",
    "graphemes",
    "truncate_ellipse",
    "truncate_ellipse_with",
]

__version__ = "0.1.0"
