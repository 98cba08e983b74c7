"""Benchmark runner for format read/write throughput."""

import logging
from dataclasses import dataclass, field
from pathlib import Path

from format_benchmark.benchmark.timing import DEFAULT_REPEATS, measure_and_repeat
from format_benchmark.formats import DEFAULT_FORMATS, BaseFormat, FormatKind, get_format
from format_benchmark.models import Person

logger = logging.getLogger(__name__)

STATS_HEADER = "Format, Read (ms), Write (ms)"


@dataclass(frozen=True)
class BenchmarkConfig:
    """Configuration for benchmark runs.

    Directory fields are relative to `base_dir`. Each format reads
    `<input_dir>/data.<ext>` and writes `<output_dir>/data.<ext>`.
    """
    base_dir: Path = Path(".")
    input_dir: Path = Path("temp/input_files")
    output_dir: Path = Path("temp/output_cpp")
    stats_dir: Path = Path("temp/stats")
    stats_filename: str = "cpp_stats.csv"
    repeats: int = DEFAULT_REPEATS
    formats: tuple[FormatKind, ...] = DEFAULT_FORMATS

    def input_path(self, fmt: BaseFormat) -> Path:
        """Input file for a format."""
        return self.base_dir / self.input_dir / f"data.{fmt.extension}"

    def output_path(self, fmt: BaseFormat) -> Path:
        """Output file for a format."""
        return self.base_dir / self.output_dir / f"data.{fmt.extension}"

    @property
    def stats_path(self) -> Path:
        """Summary CSV file."""
        return self.base_dir / self.stats_dir / self.stats_filename


@dataclass
class FormatResult:
    """Timings for one format."""
    format: str
    read_ms: float
    write_ms: float
    records: int = 0
    read_samples_ms: list[float] = field(default_factory=list)
    write_samples_ms: list[float] = field(default_factory=list)


class BenchmarkRunner:
    """Runs the read/write benchmark across formats."""

    def __init__(self, config: BenchmarkConfig | None = None):
        """Initialize the benchmark runner.

        Args:
            config: Benchmark configuration. One adapter is created per
                kind in `config.formats`.
        """
        self.config = config or BenchmarkConfig()
        self.adapters = [get_format(kind) for kind in self.config.formats]

    def run_format(self, fmt: BaseFormat) -> FormatResult:
        """Time reading a format's input file and writing the records back out.

        Args:
            fmt: Adapter to benchmark.

        Returns:
            FormatResult with the minimum read and write durations.
        """
        print(f"Extension = {fmt.extension}")
        read = measure_and_repeat(fmt.read, self.config.input_path(fmt), repeats=self.config.repeats)
        people: list[Person] = read.result
        print(f"Read duration (ms) = {read.duration_ms}")

        write = measure_and_repeat(
            fmt.write, people, self.config.output_path(fmt), repeats=self.config.repeats
        )
        print(f"Write duration (ms) = {write.duration_ms}")

        logger.debug(
            "%s: %d records, read samples %s ms, write samples %s ms",
            fmt.name, len(people), read.samples_ms, write.samples_ms,
        )
        return FormatResult(
            format=fmt.name,
            read_ms=read.duration_ms,
            write_ms=write.duration_ms,
            records=len(people),
            read_samples_ms=read.samples_ms,
            write_samples_ms=write.samples_ms,
        )

    def run(self) -> list[FormatResult]:
        """Benchmark every configured format in order and write the stats file.

        Returns:
            One FormatResult per format, in benchmark order.
        """
        (self.config.base_dir / self.config.output_dir).mkdir(parents=True, exist_ok=True)
        (self.config.base_dir / self.config.stats_dir).mkdir(parents=True, exist_ok=True)

        results = [self.run_format(fmt) for fmt in self.adapters]

        stats_path = self.config.stats_path
        print(f"Writing stats to {stats_path}")
        self.write_stats(results, stats_path)
        return results

    @staticmethod
    def write_stats(results: list[FormatResult], path: Path) -> None:
        """Write the summary CSV.

        Args:
            results: Results to write, one row each.
            path: Destination file.
        """
        with open(path, "w", encoding="utf-8") as file:
            file.write(STATS_HEADER + "\n")
            for result in results:
                file.write(f"{result.format},{result.read_ms},{result.write_ms}\n")
        logger.info("Stats written to %s", path)

    def format_results(self, results: list[FormatResult]) -> str:
        """Format benchmark results as a table.

        Args:
            results: Benchmark results.

        Returns:
            Formatted string table.
        """
        lines = []
        lines.append("=" * 60)
        lines.append("BENCHMARK RESULTS")
        lines.append("=" * 60)
        lines.append(f"{'Format':<10} {'Records':<10} {'Read (ms)':<15} {'Write (ms)':<15}")
        lines.append("-" * 60)

        for result in results:
            lines.append(
                f"{result.format:<10} {result.records:<10,} "
                f"{result.read_ms:<15.3f} {result.write_ms:<15.3f}"
            )

        lines.append("=" * 60)
        return "\n".join(lines)
