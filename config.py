import json
import math
import numbers
from histo import InvalidInput

N_SAMPLES=100
LOW=3.0
HIGH=5.0
N_BINS=10
PLOT_WIDTH=16
MARKER='*'
SEED=None

json_keys = dict(n='n', low='low', high='high', bins='nbins', width='plot_width', marker='marker', seed='seed')

class RunConfig:
    def __init__(self, n=N_SAMPLES, low=LOW, high=HIGH, nbins=N_BINS, plot_width=PLOT_WIDTH, marker=MARKER, seed=SEED):
        self.n = n
        self.low = low
        self.high = high
        self.nbins = nbins
        self.plot_width = plot_width
        self.marker = marker
        self.seed = seed

    def validate(self):
        for name in ['n','nbins','plot_width']:
            v = getattr(self,name)
            if isinstance(v,bool) or not isinstance(v,int) or v <= 0:
                raise InvalidInput(f"{name} must be a positive integer, got {v!r}")
        for name in ['low','high']:
            v = getattr(self,name)
            if isinstance(v,bool) or not isinstance(v,numbers.Real) or not math.isfinite(v):
                raise InvalidInput(f"{name} must be a finite number, got {v!r}")
        if self.seed is not None and (isinstance(self.seed,bool) or not isinstance(self.seed,int) or self.seed < 0):
            raise InvalidInput(f"seed must be a non-negative integer, got {self.seed!r}")
        if not math.isfinite(self.high - self.low):
            raise InvalidInput(f"range [{self.low}, {self.high}) is too wide to sample")
        if not self.low < self.high:
            raise InvalidInput(f"need low < high, got [{self.low}, {self.high})")
        return self

    @classmethod
    def from_json(cls, text):
        try:
            d = json.loads(text)
        except json.JSONDecodeError as e:
            raise InvalidInput(f"bad config: {e}") from e
        if not isinstance(d, dict):
            raise InvalidInput("config must be a JSON object")
        unknown = sorted(set(d) - set(json_keys))
        if unknown:
            raise InvalidInput(f"unknown config keys: {', '.join(unknown)}")
        return cls(**{json_keys[k]:v for k,v in d.items()})

    @classmethod
    def load(cls, pathname):
        try:
            with open(pathname,'r') as f:
                text = f.read()
        except UnicodeDecodeError as e:
            raise InvalidInput(f"bad config {pathname}: {e}") from e
        return cls.from_json(text)

    def __repr__(self):
        return f"RunConfig(n={self.n}, low={self.low}, high={self.high}, nbins={self.nbins}, plot_width={self.plot_width}, marker={self.marker!r}, seed={self.seed})"
