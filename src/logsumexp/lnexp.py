"""Stable evaluation of ``log(1 + exp(x))``.

Piecewise scheme after Mächler (2012), "Accurately computing
log(1 - exp(-|a|))", with switch points chosen per float width:

    x <= lo   ->  exp(x)
    x <= mid  ->  log1p(exp(x))
    x <= hi   ->  x + exp(-x)
    else      ->  x

NaN compares false against every switch point and is returned unchanged.
"""

from __future__ import annotations

from typing import Any

import numpy as np

from .widths import F64, WidthLike, resolve_width


def ln_1p_exp(x: Any, width: WidthLike = F64) -> np.floating:
    width = resolve_width(width)
    x = width.cast(x)
    if x <= width.lo:
        return width.exp(x)
    if x <= width.mid:
        return np.log1p(width.exp(x))
    if x <= width.hi:
        return x + width.exp(-x)
    return x
