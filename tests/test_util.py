import math

import numpy as np

from logsumexp import FloatClass, classify


def test_classify_python_floats():
    assert classify(0.0) is FloatClass.FINITE
    assert classify(-1e308) is FloatClass.FINITE
    assert classify(math.inf) is FloatClass.POS_INF
    assert classify(-math.inf) is FloatClass.NEG_INF
    assert classify(math.nan) is FloatClass.NAN


def test_classify_numpy_scalars():
    assert classify(np.float32(np.inf)) is FloatClass.POS_INF
    assert classify(np.float32(-np.inf)) is FloatClass.NEG_INF
    assert classify(np.float32(np.nan)) is FloatClass.NAN
    assert classify(np.float32(3.5)) is FloatClass.FINITE
    # a negative NaN is still NaN
    assert classify(-np.float64(np.nan)) is FloatClass.NAN
