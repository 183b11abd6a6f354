import math

from logsumexp import F32, LogSumExpAccumulator, ln_add_exp, ln_sum_exp

# Probabilities far below the smallest double, kept on the log scale
log_ps = [-1000.0, -1001.0, -1002.5, -math.inf]

print("naive:", math.log(sum(math.exp(lp) for lp in log_ps)) if any(math.exp(lp) for lp in log_ps) else "underflow")
print("ln_sum_exp:", float(ln_sum_exp(log_ps)))
print("ln_add_exp(-1000, -1001):", float(ln_add_exp(-1000.0, -1001.0)))

# incremental use, one value at a time, in single precision
acc = LogSumExpAccumulator(F32)
for lp in log_ps:
    acc.push(lp)
    print(f"push({lp}) -> state={acc.state.value} partial={float(acc.result())}")
