from __future__ import annotations

from typing import Any

import numpy as np

from .lnexp import ln_1p_exp
from .util import FloatClass, classify
from .widths import F32, F64, FloatWidth, WidthLike, resolve_width


def _shift_add(a: np.floating, b: np.floating, width: FloatWidth) -> np.floating:
    # a and b are both finite here; a difference beyond the float range
    # overflows to -inf, and ln_1p_exp(-inf) is 0
    with np.errstate(over="ignore"):
        if a < b:
            hi, diff = b, a - b
        elif a == b:
            hi, diff = b, width.zero
        else:
            hi, diff = a, b - a
    return hi + ln_1p_exp(diff, width)


def ln_add_exp(a: Any, b: Any, width: WidthLike = F64) -> np.floating:
    """Return ``log(exp(a) + exp(b))`` without overflow or underflow.

    Non-finite operands are resolved from their classes before any arithmetic:
    NaN on either side gives NaN, ``+inf`` on either side gives ``+inf``, and a
    ``-inf`` operand returns the other operand unchanged. Symmetric in ``a``
    and ``b``.

    >>> float(ln_add_exp(1023.0, 511.0))
    1023.0
    """
    w = resolve_width(width)
    a = w.cast(a)
    b = w.cast(b)
    ca = classify(a)
    cb = classify(b)

    if ca is FloatClass.NAN:
        return a
    if cb is FloatClass.NAN:
        return b
    if ca is FloatClass.POS_INF or cb is FloatClass.POS_INF:
        return w.inf
    if ca is FloatClass.NEG_INF:
        return b
    if cb is FloatClass.NEG_INF:
        return a
    return _shift_add(a, b, w)


def ln_add_exp_f32(a: Any, b: Any) -> np.float32:
    return ln_add_exp(a, b, F32)


def ln_add_exp_f64(a: Any, b: Any) -> np.float64:
    return ln_add_exp(a, b, F64)
