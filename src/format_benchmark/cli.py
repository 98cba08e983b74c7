"""Command-line entry point for the format benchmark.

Input, output and stats locations are fixed relative to the working
directory:

    temp/input_files/data.<ext>   files to read
    temp/output_cpp/data.<ext>    files written back
    temp/stats/cpp_stats.csv      summary table
"""

import argparse
import logging

from format_benchmark.benchmark import BenchmarkConfig, BenchmarkRunner


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    arg_parser = argparse.ArgumentParser(
        description="Benchmark CSV, JSON, TOML, XML and YAML read/write times",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog=__doc__,
    )
    arg_parser.add_argument(
        "--verbose", "-v",
        action="store_true",
        help="Show debug logging"
    )

    args = arg_parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.INFO,
        format="[%(levelname)s] %(message)s",
        handlers=[logging.StreamHandler()],
    )

    config = BenchmarkConfig()

    print("=" * 60)
    print("Serialization Format Benchmark")
    print("=" * 60)
    print(f"Repeats: {config.repeats}")
    print(f"Formats: {', '.join(kind.value for kind in config.formats)}")
    print()

    runner = BenchmarkRunner(config)
    results = runner.run()

    print()
    print(runner.format_results(results))
    print("\nBenchmark complete!")
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
