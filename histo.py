import sys
import math
import numbers
from util import seq_min, seq_max

class HistogramError(Exception):
    pass
class InvalidInput(HistogramError):
    pass
class DegenerateRange(HistogramError):
    pass

def _positive_int(name, value):
    if isinstance(value, bool) or not isinstance(value, numbers.Integral):
        raise InvalidInput(f"{name} must be an integer, got {value!r}")
    if value <= 0:
        raise InvalidInput(f"{name} must be positive, got {value}")
    return int(value)

class Histogram:
    """
    Equal-width bucket counts over the closed range [min_val, max_val] of a
    sample sequence. Bucket i covers [min_val + i*bin_size, min_val + (i+1)*bin_size),
    except the last one, which also holds max_val.

    Raises InvalidInput for an empty sequence or nbins <= 0, and
    DegenerateRange when the bin width is zero (every sample equal, or a span
    too narrow to split). A non-finite span is InvalidInput.
    """
    def __init__(self, samples, nbins):
        self.nbins = _positive_int('nbins', nbins)
        samples = list(samples)
        if not samples:
            raise InvalidInput("no samples to bin")
        self.min_val = seq_min(samples)
        self.max_val = seq_max(samples)
        span = self.max_val - self.min_val
        if not math.isfinite(span):
            raise InvalidInput(f"sample range [{self.min_val}, {self.max_val}] is not finite")
        self.bin_size = span / self.nbins
        # also catches distinct samples whose width underflows to zero
        if self.bin_size == 0:
            raise DegenerateRange(f"samples span [{self.min_val}, {self.max_val}], bin width would be zero")
        counts = [0]*self.nbins
        for v in samples:
            counts[self.bin_index(v)] += 1
        self.counts = tuple(counts)

    def bin_index(self, v):
        idx = int((v - self.min_val) / self.bin_size)
        # max_val lands on nbins exactly; half-open buckets against a closed range
        if idx >= self.nbins:
            idx = self.nbins - 1
        return idx

    @property
    def total(self):
        return sum(self.counts)

    @property
    def max_count(self):
        return seq_max(self.counts)

    @property
    def left_edges(self):
        return tuple(self.min_val + i*self.bin_size for i in range(self.nbins))

    def buckets(self):
        return zip(self.left_edges, self.counts)

    def __repr__(self):
        return f"Histogram(nbins={getattr(self, 'nbins', None)}, min_val={getattr(self, 'min_val', None)}, max_val={getattr(self, 'max_val', None)}, counts={list(getattr(self, 'counts', ()))})"

class CLIHistogram:
    def __init__(self, width=16, char='*', show_counts=False):
        self.width = _positive_int('width', width)
        if not isinstance(char, str) or len(char) != 1:
            raise InvalidInput(f"marker must be a single character, got {char!r}")
        self.char = char
        self.show_counts = show_counts

    def bar_length(self, count, max_count):
        # integer floor, so the fullest bucket gets exactly width markers
        return (count * self.width) // max_count

    def lines(self, hist):
        maxcount = hist.max_count
        if maxcount <= 0:
            raise InvalidInput("every bucket is empty, nothing to scale against")
        out = []
        for lo, c in hist.buckets():
            line = f"{lo:5.2f} {self.char * self.bar_length(c, maxcount)}"
            if self.show_counts:
                line += f" ({c})"
            out.append(line)
        return out

    def print(self, hist, out=None):
        out = sys.stdout if out is None else out
        lines = self.lines(hist)
        for line in lines:
            out.write(line + "\n")
        return lines
