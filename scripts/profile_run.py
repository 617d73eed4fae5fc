#!/usr/bin/env python3
"""
Low-variance performance profiling script for nameparts.

This script minimizes measurement variance by:
- Using a fixed, reproducible list of names
- Pre-warming the vocabulary cache before measuring
- Taking multiple measurements and reporting statistics
- Forcing garbage collection between runs
"""

import cProfile
import gc
import pstats
import statistics
import time

from nameparts import FullNameParser, ParserConfig

SAMPLE_NAMES = [
    "David Davis",
    "Davis, David William",
    "Vincent Van Gogh",
    "de la Véña, Jüan",
    "Jüan Martinez de Lorenzo y Gutierez",
    'Orenthal James "O. J." Simpson',
    "Sammy Davis, Jr.",
    "Doe-Ray, John P., Jr., LUTC",
    "Dr. Prof. John Albert Doe",
    "Mr. de Lorenzo y Gutierez, Jr. Jüan (Martin) Martinez",
    "MR. JÜAN MARTINEZ (MARTIN) DE LORENZO Y GUTIEREZ JR.",
    "mary-jane o'connor",
]


def run_single_measurement(parser, names, enable_profiling=True):
    """Run a single performance measurement with optional profiling."""
    gc.collect()  # Clean state between runs

    if enable_profiling:
        pr = cProfile.Profile()
        pr.enable()

    start = time.perf_counter()
    for name in names:
        parser.parse(name)
    end = time.perf_counter()

    if enable_profiling:
        pr.disable()
        return end - start, pr
    return end - start, None


def main():
    print("nameparts Performance Profiler (Low Variance)")
    print("=" * 45)

    parser = FullNameParser(ParserConfig(normalize=True))
    names = SAMPLE_NAMES * 500
    print(f"Using {len(names)} names")

    for name in SAMPLE_NAMES:
        parser.parse(name)

    print("Running 5 pure measurements (no profiling overhead)...")
    pure_times = []
    for i in range(5):
        runtime, _ = run_single_measurement(parser, names, enable_profiling=False)
        pure_times.append(runtime)
        print(f"Pure run {i+1}: {runtime:.4f}s")

    mean_time = statistics.mean(pure_times)
    std_time = statistics.stdev(pure_times) if len(pure_times) > 1 else 0
    cv = (std_time / mean_time * 100) if mean_time > 0 else 0

    print("\nPure Performance Statistics:")
    print(f"Mean:     {mean_time:.4f}s")
    print(f"Std Dev:  {std_time:.4f}s")
    print(f"CV:       {cv:.2f}%")
    print(f"Range:    {min(pure_times):.4f}s - {max(pure_times):.4f}s")

    names_per_sec = len(names) / mean_time
    us_per_name = (mean_time / len(names)) * 1_000_000

    print("\nPerformance Metrics:")
    print(f"Rate:     {names_per_sec:.0f} names/second")
    print(f"Per name: {us_per_name:.1f} microseconds")

    print("\nDetailed Profiling (single run with cProfile overhead):")
    print("=" * 58)
    _, profiler = run_single_measurement(parser, names, enable_profiling=True)
    ps = pstats.Stats(profiler).strip_dirs().sort_stats("tottime")
    ps.print_stats(25)


if __name__ == "__main__":
    main()
