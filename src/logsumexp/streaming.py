"""One-pass LogSumExp over arbitrary iterables.

The reduction keeps a running maximum ``m`` and a running sum of
``exp(v - m)`` (online normalizer of Milakov & Gimelshein, 2018), rescaling
the sum whenever the maximum grows so every term stays in ``(0, 1]``.
Non-finite inputs are handled by an explicit state machine:

* ``-inf`` contributes nothing and is skipped.
* ``+inf`` fixes the result at ``+inf`` unless a NaN follows, so the rest of
  the input is still read, but only to look for NaN.
* NaN is absorbing: the pass stops and the NaN is returned.
"""

from __future__ import annotations

import logging
from collections.abc import Iterable
from enum import Enum
from typing import Any

import numpy as np

from .util import FloatClass, classify
from .widths import F32, F64, FloatWidth, WidthLike, resolve_width

logger = logging.getLogger(__name__)


class AccumulatorState(Enum):
    ACCUMULATING = "accumulating"
    SCANNING = "scanning"  # +inf seen; looking only for NaN
    NAN = "nan"


class LogSumExpAccumulator:
    """Incremental LogSumExp with O(1) state.

    ``push`` returns False once the outcome is fixed regardless of any
    further input (a NaN has been seen); callers may stop feeding it then.
    """

    def __init__(self, width: WidthLike = F64) -> None:
        self.width: FloatWidth = resolve_width(width)
        self.state = AccumulatorState.ACCUMULATING
        self.count = 0
        self._max = self.width.neg_inf
        self._sum = self.width.zero
        self._nan = self.width.nan

    def push(self, value: Any) -> bool:
        if self.state is AccumulatorState.NAN:
            return False
        w = self.width
        v = w.cast(value)
        self.count += 1
        cls = classify(v)

        if cls is FloatClass.NEG_INF:
            return True
        if cls is FloatClass.NAN:
            self.state = AccumulatorState.NAN
            self._nan = v
            logger.debug("NaN at element %d; result is NaN", self.count - 1)
            return False
        if self.state is AccumulatorState.SCANNING:
            return True
        if cls is FloatClass.POS_INF:
            self.state = AccumulatorState.SCANNING
            logger.debug("+inf at element %d; scanning remainder for NaN", self.count - 1)
            return True

        m_new = max(self._max, v)
        with np.errstate(over="ignore"):
            # differences past the float range become -inf and exp gives 0
            self._sum = self._sum * w.exp(self._max - m_new) + w.exp(v - m_new)
        self._max = m_new
        return True

    def extend(self, values: Iterable[Any]) -> LogSumExpAccumulator:
        for v in values:
            if not self.push(v):
                break
        return self

    @property
    def done(self) -> bool:
        return self.state is AccumulatorState.NAN

    def result(self) -> np.floating:
        w = self.width
        if self.state is AccumulatorState.NAN:
            return self._nan
        if self.state is AccumulatorState.SCANNING or self._max == w.inf:
            return w.inf
        if self._sum == w.zero:
            # nothing finite seen: log of an empty sum
            return w.neg_inf
        return self._max + w.ln(self._sum)


def ln_sum_exp(values: Iterable[Any], width: WidthLike = F64) -> np.floating:
    """Return ``log(sum(exp(v) for v in values))`` in a single pass.

    ``values`` may be any iterable, including a one-shot generator; it is read
    in order and never re-iterated. Reading stops at the first NaN. An empty
    input gives ``-inf``.

    >>> import math
    >>> float(ln_sum_exp(math.log(x) if x else -math.inf for x in range(10)))  # doctest: +ELLIPSIS
    3.80666...
    """
    return LogSumExpAccumulator(width).extend(values).result()


def ln_mean_exp(values: Iterable[Any], width: WidthLike = F64) -> np.floating:
    """Log of the mean of ``exp(v)``: ``ln_sum_exp(values) - log(n)``.

    ``n`` counts every element read, ``-inf`` entries included. Empty input
    is indeterminate and gives NaN.
    """
    acc = LogSumExpAccumulator(width).extend(values)
    w = acc.width
    if acc.count == 0:
        return w.nan
    return acc.result() - w.ln(acc.count)


def ln_sum_exp_f32(values: Iterable[Any]) -> np.float32:
    return ln_sum_exp(values, F32)


def ln_sum_exp_f64(values: Iterable[Any]) -> np.float64:
    return ln_sum_exp(values, F64)
