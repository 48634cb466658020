# simulator.py

import argparse
import sys
import time
import numpy as np
from policies import lru_fault_count, fifo_fault_count, clock_fault_count
from working_set import MIN_WORKING_SET, MAX_WORKING_SET, check_size
from workload import NormalVariateGenerator, ReferenceTraceGenerator

TRIALS = 1000
SIZES  = range(MIN_WORKING_SET, MAX_WORKING_SET + 1)

# report order
POLICIES = {
    "LRU":   lru_fault_count,
    "FIFO":  fifo_fault_count,
    "Clock": clock_fault_count,
}


def run_trial(trace, sizes, results):
    """Replay one trace through every policy at every size, adding into results."""
    base = sizes[0]
    for size in sizes:
        for name, fault_count in POLICIES.items():
            results[name][size - base] += fault_count(trace, size)


def run_experiment(trials=TRIALS, sizes=SIZES, generator=None, progress=None):
    """
    Sum fault counts over `trials` independent traces.

    Returns {policy name: int array}, where index i holds the total for
    working set size sizes[0] + i. The generator is shared across trials
    and its spare variate carries over from one trace to the next.
    """
    sizes = list(sizes)
    if not sizes:
        raise ValueError("No working set sizes given")
    for size in sizes:
        check_size(size)
    if sizes != list(range(sizes[0], sizes[0] + len(sizes))):
        raise ValueError(f"Working set sizes must be consecutive, got {sizes}")

    traces  = ReferenceTraceGenerator(generator or NormalVariateGenerator())
    results = {name: np.zeros(len(sizes), dtype=np.int64) for name in POLICIES}

    for trial in range(trials):
        run_trial(traces.next_trace(), sizes, results)
        if progress is not None and (trial + 1) % 100 == 0:
            progress(trial + 1, trials)
    return results


def format_report(results, sizes=SIZES):
    sizes = list(sizes)
    lines = []
    for i, size in enumerate(sizes):
        for name in POLICIES:
            lines.append(f"Working Set {size} - {name} - {int(results[name][i])}")
        lines.append("")
    return "\n".join(lines) + "\n"


def _print_progress(done, total):
    print(f"  {done}/{total} trials", file=sys.stderr)


def build_parser():
    parser = argparse.ArgumentParser(
        description="Monte Carlo page fault counts for LRU, FIFO and Clock "
                    f"over working set sizes {MIN_WORKING_SET}-{MAX_WORKING_SET}"
    )
    parser.add_argument("--trials", type=int, default=TRIALS,
                        help=f"number of traces to generate (default: {TRIALS})")
    parser.add_argument("--seed", type=int, default=None,
                        help="seed for the random source (default: unseeded)")
    parser.add_argument("--timing", action="store_true",
                        help="print elapsed time to stderr")
    parser.add_argument("--quiet", action="store_true",
                        help="do not print progress to stderr")
    return parser


def main(argv=None):
    parser = build_parser()
    args = parser.parse_args(argv)
    if args.trials < 1:
        parser.error(f"--trials must be at least 1, got {args.trials}")

    start = time.time()
    results = run_experiment(
        trials=args.trials,
        generator=NormalVariateGenerator(seed=args.seed),
        progress=None if args.quiet else _print_progress,
    )
    print(format_report(results), end="")
    if args.timing:
        print(f"Time: {time.time() - start:.2f}s", file=sys.stderr)
    return 0


if __name__ == "__main__":
    sys.exit(main())
