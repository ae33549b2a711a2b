"""Exports batch and sweep results to CSV or Parquet."""

import csv
from pathlib import Path
from typing import Any

import pyarrow as pa
import pyarrow.parquet as pq

from warehouse_sim.simulation.warehouse import BatchReport, SweepResult
from warehouse_sim.writers.base import BaseWriter

BATCH_SCHEMA = pa.schema(
    [
        ("units", pa.int64()),
        ("process", pa.string()),
        ("operation", pa.string()),
        ("parallel_capacity", pa.float64()),
        ("time_min", pa.float64()),
        ("cost", pa.float64()),
    ]
)

SWEEP_SCHEMA = pa.schema(
    [
        ("units", pa.int64()),
        ("total_time_min", pa.float64()),
        ("total_cost", pa.float64()),
    ]
)

SUPPORTED_FORMATS = ("csv", "parquet")


class ResultWriter(BaseWriter):
    """Writes one row per operation of a batch, or one row per swept batch size."""

    def __init__(self, output_dir: str, output_format: str = "csv") -> None:
        if output_format not in SUPPORTED_FORMATS:
            raise ValueError(
                f"Unsupported output format {output_format!r}; "
                f"expected one of {SUPPORTED_FORMATS}"
            )
        self.output_dir = Path(output_dir)
        self.output_dir.mkdir(parents=True, exist_ok=True)
        self.output_format = output_format

    def write(self, data: Any, destination: str) -> None:
        """Dispatch on result type; `destination` is a file stem."""
        if isinstance(data, BatchReport):
            self._write_rows(destination, batch_rows(data), BATCH_SCHEMA)
        elif isinstance(data, SweepResult):
            self._write_rows(destination, sweep_rows(data), SWEEP_SCHEMA)
        else:
            raise TypeError(f"Cannot write results of type {type(data).__name__}")

    def write_batch(self, report: BatchReport) -> Path:
        self.write(report, "batch_results")
        return self._path_for("batch_results")

    def write_sweep(self, sweep: SweepResult) -> Path:
        self.write(sweep, "sweep_results")
        return self._path_for("sweep_results")

    def _path_for(self, stem: str) -> Path:
        return self.output_dir / f"{stem}.{self.output_format}"

    def _write_rows(
        self, stem: str, rows: list[dict[str, Any]], schema: pa.Schema
    ) -> None:
        filepath = self._path_for(stem)
        if self.output_format == "parquet":
            table = pa.Table.from_pylist(rows, schema=schema)
            pq.write_table(table, filepath)
            return

        with open(filepath, "w", newline="", encoding="utf-8") as f:
            writer = csv.DictWriter(f, fieldnames=schema.names)
            writer.writeheader()
            writer.writerows(rows)


def batch_rows(report: BatchReport) -> list[dict[str, Any]]:
    return [
        {
            "units": report.units,
            "process": process.name,
            "operation": op.name,
            "parallel_capacity": op.parallel_capacity,
            "time_min": op.time_min,
            "cost": op.cost,
        }
        for process in report.processes
        for op in process.operations
    ]


def sweep_rows(sweep: SweepResult) -> list[dict[str, Any]]:
    return [
        {"units": units, "total_time_min": time_min, "total_cost": cost}
        for units, time_min, cost in zip(
            sweep.units.tolist(),
            sweep.total_time_min.tolist(),
            sweep.total_cost.tolist(),
        )
    ]
