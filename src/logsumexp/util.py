from __future__ import annotations

import math
from enum import Enum

LogProb = float


class FloatClass(Enum):
    FINITE = "finite"
    POS_INF = "+inf"
    NEG_INF = "-inf"
    NAN = "nan"


def classify(x: float) -> FloatClass:
    """Four-way IEEE-754 classification; NaN is tested with isnan, never ``==``."""
    if math.isnan(x):
        return FloatClass.NAN
    if math.isinf(x):
        return FloatClass.POS_INF if x > 0 else FloatClass.NEG_INF
    return FloatClass.FINITE
