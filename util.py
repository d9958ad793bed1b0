import time
import operator
import numpy as np

def extreme(seq, better):
    """
    single pass reduction: keeps the running element unless better(x, current)
    """
    it = iter(seq)
    try:
        m = next(it)
    except StopIteration:
        raise ValueError("extreme() of an empty sequence") from None
    for x in it:
        m = x if better(x, m) else m
    return m

seq_min = lambda seq: extreme(seq, operator.lt)
seq_max = lambda seq: extreme(seq, operator.gt)

def timestamp():
    return time.time()

class Sampler:
    """
    uniform draws from an explicit generator handle; same seed, same samples
    """
    def __init__(self, seed=None, rng=None):
        self.rng = rng if rng is not None else np.random.default_rng(seed)

    def draw_uniform(self, low, high):
        return float(self.rng.uniform(low, high))

    def draw(self, n, low, high):
        if n < 0:
            raise ValueError(f"sample count must be non-negative, got {n}")
        if high < low:
            raise ValueError(f"empty range [{low}, {high})")
        return [self.draw_uniform(low, high) for _ in range(n)]
