from __future__ import annotations

import logging
from dataclasses import dataclass, field
from typing import Any

import numpy as np

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class FloatWidth:
    """Binds the constants and elementary functions of one float width.

    Every routine in this package is written once against a ``FloatWidth``;
    ``F32`` and ``F64`` are the two instantiations. ``lo``/``mid``/``hi``
    are the switch points of :func:`logsumexp.lnexp.ln_1p_exp`.
    """

    name: str
    dtype: type[np.floating]
    lo: float
    mid: float
    hi: float
    inf: np.floating = field(init=False)
    neg_inf: np.floating = field(init=False)
    nan: np.floating = field(init=False)
    zero: np.floating = field(init=False)
    eps: np.floating = field(init=False)

    def __post_init__(self) -> None:
        t = self.dtype
        object.__setattr__(self, "inf", t(np.inf))
        object.__setattr__(self, "neg_inf", t(-np.inf))
        object.__setattr__(self, "nan", t(np.nan))
        object.__setattr__(self, "zero", t(0.0))
        object.__setattr__(self, "eps", np.finfo(t).eps)

    def cast(self, x: Any) -> np.floating:
        return self.dtype(x)

    def exp(self, x: Any) -> np.floating:
        return np.exp(self.dtype(x))

    def ln(self, x: Any) -> np.floating:
        return np.log(self.dtype(x))

    def ln_1p_exp(self, x: Any) -> np.floating:
        from .lnexp import ln_1p_exp

        return ln_1p_exp(x, self)

    def __str__(self) -> str:
        return self.name


F32 = FloatWidth("f32", np.float32, lo=-17.0, mid=9.0, hi=15.0)
F64 = FloatWidth("f64", np.float64, lo=-37.0, mid=18.0, hi=33.3)

_ALIASES: dict[str, FloatWidth] = {
    "f32": F32,
    "float32": F32,
    "single": F32,
    "f64": F64,
    "float64": F64,
    "double": F64,
}

WidthLike = FloatWidth | str | type | np.dtype | None


def resolve_width(width: WidthLike) -> FloatWidth:
    """Map a width name, dtype or descriptor to ``F32`` or ``F64``.

    Accepts a ``FloatWidth``, a numpy dtype or scalar type, or one of the
    names in ``_ALIASES``. ``None`` means ``F64``.
    """
    if width is None:
        return F64
    if isinstance(width, FloatWidth):
        return width
    if isinstance(width, str):
        key = width.strip().lower()
        if key in _ALIASES:
            return _ALIASES[key]
        raise ValueError(f"Unknown float width {width!r}; expected one of {sorted(_ALIASES)}")
    try:
        dt = np.dtype(width)
    except TypeError:
        raise ValueError(f"Cannot interpret {width!r} as a float width") from None
    logger.debug("Resolving float width from dtype %s", dt)
    if dt == np.float32:
        return F32
    if dt == np.float64:
        return F64
    raise ValueError(f"Unsupported dtype {dt}; only float32 and float64 are supported")
