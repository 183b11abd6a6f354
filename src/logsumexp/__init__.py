from .lnexp import ln_1p_exp
from .pairwise import ln_add_exp, ln_add_exp_f32, ln_add_exp_f64
from .streaming import (
    AccumulatorState,
    LogSumExpAccumulator,
    ln_mean_exp,
    ln_sum_exp,
    ln_sum_exp_f32,
    ln_sum_exp_f64,
)
from .util import FloatClass, LogProb, classify
from .widths import F32, F64, FloatWidth, resolve_width

__all__ = [
    "F32",
    "F64",
    "FloatWidth",
    "resolve_width",
    "FloatClass",
    "LogProb",
    "classify",
    "ln_1p_exp",
    "ln_add_exp",
    "ln_add_exp_f32",
    "ln_add_exp_f64",
    "ln_sum_exp",
    "ln_sum_exp_f32",
    "ln_sum_exp_f64",
    "ln_mean_exp",
    "LogSumExpAccumulator",
    "AccumulatorState",
]
