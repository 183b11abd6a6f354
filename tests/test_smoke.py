import math

from logsumexp import ln_add_exp, ln_sum_exp


def test_log_domain_addition():
    # adding two probabilities without leaving the log domain
    lp = ln_add_exp(math.log(0.25), math.log(0.5))
    assert abs(lp - math.log(0.75)) < 1e-12

    total = ln_sum_exp(math.log(p) for p in [0.1, 0.2, 0.3, 0.4])
    assert abs(total) < 1e-12
