"""Parallel parsing of several chart directories.

Each chart is parsed independently in a worker thread. A chart whose files
are missing, unreadable, or invalid is logged and skipped; the others
continue. Results keep the order the charts were given in.
"""

from concurrent.futures import Future, ThreadPoolExecutor, as_completed
from pathlib import Path

from loguru import logger

from .chart_info import parse_chart_information
from .config import DocsConfig
from .errors import HelmDocsError
from .models import BatchResult, ChartDocumentationInfo

log = logger.bind(stage="batch")


class ChartBatch:
    """Parse a list of chart directories with a bounded thread pool.

    Attributes:
        config: helm-docs configuration (file names, worker limit)
    """

    def __init__(self, config: DocsConfig) -> None:
        self.config = config

    def run(self, chart_dirs: list[Path]) -> BatchResult:
        """Parse every chart in chart_dirs.

        Returns:
            BatchResult with parsed charts in input order and failed dirs
        """
        if not chart_dirs:
            log.warning("No charts to parse")
            return BatchResult()

        max_workers = self.config.resolve_workers(len(chart_dirs))
        log.info(f"Parsing {len(chart_dirs)} charts, max_workers={max_workers}")

        results: dict[Path, ChartDocumentationInfo | None] = {}
        with ThreadPoolExecutor(max_workers=max_workers) as executor:
            futures: dict[Future, Path] = {
                executor.submit(self._parse_single_safe, chart_dir): chart_dir
                for chart_dir in chart_dirs
            }
            for future in as_completed(futures):
                results[futures[future]] = future.result()

        batch = BatchResult(total=len(chart_dirs))
        for chart_dir in chart_dirs:
            info = results[chart_dir]
            if info is None:
                batch.failed += 1
                batch.failed_dirs.append(chart_dir)
            else:
                batch.completed += 1
                batch.charts.append(info)

        log.info(
            f"Batch complete: {batch.completed} parsed, "
            f"{batch.failed} failed, {batch.total} total"
        )
        return batch

    def _parse_single_safe(self, chart_dir: Path) -> ChartDocumentationInfo | None:
        """Parse one chart, returning None instead of raising on chart errors."""
        try:
            return parse_chart_information(
                chart_dir,
                chart_file=self.config.chart_file,
                requirements_file=self.config.requirements_file,
                values_file=self.config.values_file,
            )
        except HelmDocsError as exc:
            log.warning(f"Skipping chart {chart_dir}: {exc}")
            return None


def parse_charts(chart_dirs: list[Path], config: DocsConfig) -> BatchResult:
    return ChartBatch(config).run(chart_dirs)
