"""Writers module for exporting batch simulation results."""

from warehouse_sim.writers.base import BaseWriter
from warehouse_sim.writers.result_writer import ResultWriter

__all__ = ["BaseWriter", "ResultWriter"]
