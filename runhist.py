import sys
import argparse
from util import Sampler, timestamp
from histo import Histogram, CLIHistogram, HistogramError
from config import RunConfig

def run(config, out=None, sampler=None, show_counts=False, verbose=False):
    config.validate()
    renderer = CLIHistogram(config.plot_width, config.marker, show_counts=show_counts)
    sampler = Sampler(config.seed) if sampler is None else sampler
    start = timestamp()
    samples = sampler.draw(config.n, config.low, config.high)
    if verbose:
        print(f"drew {len(samples)} samples in {timestamp() - start:.4f} seconds", file=sys.stderr)
    hist = Histogram(samples, config.nbins)
    if verbose:
        print(f"range [{hist.min_val:.4f}, {hist.max_val:.4f}], bin size {hist.bin_size:.4f}", file=sys.stderr)
    renderer.print(hist, out)
    return hist

def mk_parser():
    parser = argparse.ArgumentParser(
        description="Draw uniform samples and print their histogram as text."
    )
    parser.add_argument("-n", type=int, help="number of samples")
    parser.add_argument("--low", type=float, help="lower bound of the uniform range")
    parser.add_argument("--high", type=float, help="upper bound of the uniform range")
    parser.add_argument("--bins", type=int, dest="nbins", help="number of buckets")
    parser.add_argument("--width", type=int, dest="plot_width", help="length of the longest bar")
    parser.add_argument("--marker", help="bar character")
    parser.add_argument("--seed", type=int, help="generator seed")
    parser.add_argument("--config", help="JSON file with any of: n, low, high, bins, width, marker, seed")
    parser.add_argument("--counts", action="store_true", help="append each bucket's count")
    parser.add_argument("-v", "--verbose", action="store_true")
    return parser

def main(argv=None):
    args = mk_parser().parse_args(argv)
    try:
        config = RunConfig.load(args.config) if args.config else RunConfig()
        for k in ['n','low','high','nbins','plot_width','marker','seed']:
            v = getattr(args,k)
            if v is not None:
                setattr(config,k,v)
        if args.verbose:
            print(config, file=sys.stderr)
        run(config, show_counts=args.counts, verbose=args.verbose)
    except (HistogramError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 2
    return 0

if __name__ == "__main__":
    sys.exit(main())
