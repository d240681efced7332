from __future__ import annotations

import argparse
import logging
import math
import os
import random
import sys
import time
from concurrent.futures import ProcessPoolExecutor

import matplotlib.pyplot as plt

from hsort.datagen import SCENARIOS, random_ints
from hsort.errors import InvalidInputError
from hsort.sorters import QUADRATIC, SORTERS, get_sorter

log = logging.getLogger(__name__)

DEFAULT_SIZES = list(range(1, 20_001, 2_000))
DEFAULT_REPS = 3
# insertion/selection are skipped above this length
QUADRATIC_LIMIT = 5_000


def measure(sort_fn, base_arr, reps=DEFAULT_REPS):
    best = float('inf')
    for _ in range(reps):
        arr = list(base_arr)
        start = time.perf_counter()
        try:
            sort_fn(arr)
        except InvalidInputError:
            # nothing to sort
            return 0.0
        end = time.perf_counter()
        best = min(best, end - start)
    return best


def bench_one_n(args):
    n, base_arr, names, reps = args

    times = {}
    for name in names:
        if name in QUADRATIC and n > QUADRATIC_LIMIT:
            times[name] = math.nan
            continue
        times[name] = measure(get_sorter(name), base_arr, reps=reps)

    return n, times


def run_bench(tasks, names, reps=DEFAULT_REPS, max_workers=None):
    """
    Time every sorter in *names* on each ``(n, base_arr)`` task.

    Tasks run in worker processes; results come back in task order as
    ``{name: [seconds, ...]}``.
    """
    results = {name: [] for name in names}
    jobs = [(n, base_arr, names, reps) for n, base_arr in tasks]

    with ProcessPoolExecutor(max_workers=max_workers) as executor:
        for n, times in executor.map(bench_one_n, jobs):
            log.debug("n=%d %s", n, " ".join(f"{k}={v:.6f}" for k, v in times.items()))
            for name in names:
                results[name].append(times[name])

    return results


def plot_results(sizes, series, title, out=None):
    """
    sizes  - list of array sizes
    series - list of tuples (label, values), where values is a list of times corresponding to sizes
    title  - title of the plot
    out    - file to save the figure to; the plot window is shown when omitted
    """
    plt.figure(figsize=(10, 6))
    for label, values in series:
        plt.plot(sizes, values, label=label)

    plt.title(title)
    plt.xlabel("Array size")
    plt.ylabel("Time, sec")
    plt.grid(True)
    plt.legend()
    plt.tight_layout()
    if out is None:
        plt.show()
    else:
        plt.savefig(out)
        plt.close()


def verify(names, trials=100, length=1_000, low=-10_000, high=10_000, rng=None):
    """
    Sort random lists with each sorter and compare against ``sorted()``.

    Returns a list of human-readable mismatch descriptions, empty on success.
    """
    rng = rng if rng is not None else random.Random()
    failures = []
    for name in names:
        sort_fn = get_sorter(name)
        for trial in range(trials):
            arr = random_ints(length, low, high, rng=rng)
            expected = sorted(arr)
            sort_fn(arr)
            if len(arr) != len(expected):
                failures.append(f"{name}: trial {trial}: length is {len(arr)}, should be {len(expected)}")
                continue
            for i, (got, want) in enumerate(zip(arr, expected)):
                if got != want:
                    failures.append(f"{name}: trial {trial}: index {i} is {got}, should be {want}")
                    break
    return failures


def _parse_sizes(text):
    try:
        sizes = [int(s) for s in text.split(",") if s.strip()]
    except ValueError:
        raise argparse.ArgumentTypeError(f"not a comma-separated list of ints: {text!r}") from None
    if not sizes or min(sizes) < 1:
        raise argparse.ArgumentTypeError("sizes must be positive")
    return sizes


def build_parser():
    ap = argparse.ArgumentParser(prog="hsort-bench", description="Compare the hsort integer sorters")
    ap.add_argument("--sizes", type=_parse_sizes, default=DEFAULT_SIZES,
                    help="comma-separated input lengths")
    ap.add_argument("--reps", type=int, default=DEFAULT_REPS,
                    help="timing repetitions per input, best one is kept")
    ap.add_argument("--scenario", action="append", choices=list(SCENARIOS),
                    help="input shape to benchmark (repeatable, default: all)")
    ap.add_argument("--algorithm", action="append", choices=list(SORTERS),
                    help="sorter to benchmark (repeatable, default: all); "
                         "hash runs in time linear in the value range as well as the length")
    ap.add_argument("--workers", type=int, default=None,
                    help="worker processes (default: CPU count)")
    ap.add_argument("--seed", type=int, default=None,
                    help="seed for input generation")
    ap.add_argument("--out-dir", default=None,
                    help="save plots here as <scenario>.png instead of showing them")
    ap.add_argument("--verify", action="store_true",
                    help="check every sorter against sorted() and exit")
    ap.add_argument("-v", "--verbose", action="store_true")
    return ap


def main(argv=None):
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    names = args.algorithm or list(SORTERS)
    rng = random.Random(args.seed)

    if args.verify:
        failures = verify(names, rng=rng)
        for f in failures:
            log.error("%s", f)
        if failures:
            return 1
        log.info("all sorters agree with sorted() (%s)", ", ".join(names))
        return 0

    if args.out_dir is not None:
        os.makedirs(args.out_dir, exist_ok=True)

    for scenario in args.scenario or list(SCENARIOS):
        gen = SCENARIOS[scenario]
        tasks = [(n, gen(n, rng=rng)) for n in args.sizes]

        log.info("benchmarking %s data, sizes %d..%d", scenario, min(args.sizes), max(args.sizes))
        results = run_bench(tasks, names, reps=args.reps, max_workers=args.workers)

        out = None
        if args.out_dir is not None:
            out = os.path.join(args.out_dir, f"{scenario}.png")
        plot_results(
            args.sizes,
            [(name, results[name]) for name in names],
            f"{scenario.capitalize()} data sorting comparison",
            out=out,
        )
        if out is not None:
            log.info("wrote %s", out)

    return 0


if __name__ == "__main__":
    sys.exit(main())
