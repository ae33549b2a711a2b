"""
Warehouse Batch Simulation Runner.

Usage:
    poetry run python run_simulation.py                        # Default batch (200 units)
    poetry run python run_simulation.py --units 500            # Custom batch size
    poetry run python run_simulation.py --sweep 50 100 200 400 # Compare batch sizes
    poetry run python run_simulation.py --output-dir data/output --format parquet
"""

import argparse
import dataclasses
import logging
import time

from warehouse_sim.config.loader import (
    load_simulation_config,
    load_warehouse_definition,
)
from warehouse_sim.resources.costing import CostPolicy
from warehouse_sim.simulation.builder import WarehouseBuilder
from warehouse_sim.simulation.report import format_batch_report, format_sweep
from warehouse_sim.writers import ResultWriter


def main() -> None:
    """Run a batch simulation against the configured warehouse."""
    parser = argparse.ArgumentParser(
        description="Warehouse Batch Simulation Runner",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  poetry run python run_simulation.py --units 1000 --include-machine-energy
  poetry run python run_simulation.py --sweep 10 100 1000 --output-dir out
        """,
    )

    parser.add_argument(
        "--units",
        type=int,
        default=None,
        help="Batch size in units (default: simulation_config.json value)",
    )
    parser.add_argument(
        "--definition",
        type=str,
        default=None,
        help="Path to a warehouse definition JSON (default: bundled example)",
    )
    parser.add_argument(
        "--config",
        type=str,
        default=None,
        help="Path to a simulation config JSON (default: bundled config)",
    )
    parser.add_argument(
        "--sweep",
        type=int,
        nargs="+",
        default=None,
        help="Evaluate several batch sizes instead of a single batch",
    )
    parser.add_argument(
        "--include-machine-energy",
        action="store_true",
        help="Add machine energy cost to operation costs",
    )
    parser.add_argument(
        "--output-dir",
        type=str,
        default=None,
        help="Directory for exported results (no export if omitted)",
    )
    parser.add_argument(
        "--format",
        type=str,
        choices=["csv", "parquet"],
        default="csv",
        help="Export format (default: csv)",
    )
    parser.add_argument(
        "--verbose",
        "-v",
        action="store_true",
        help="Log per-operation figures",
    )

    args = parser.parse_args()

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    config = load_simulation_config(args.config)
    sim_params = config.get("simulation_parameters", {})
    reporting = sim_params.get("reporting", {})
    time_precision = int(reporting.get("time_precision", 1))
    cost_precision = int(reporting.get("cost_precision", 2))

    policy = CostPolicy.from_config(config)
    if args.include_machine_energy:
        policy = dataclasses.replace(policy, include_machine_energy=True)

    definition = load_warehouse_definition(args.definition)
    warehouse = WarehouseBuilder(definition, policy=policy).build()

    writer = (
        ResultWriter(args.output_dir, output_format=args.format)
        if args.output_dir
        else None
    )

    start_time = time.time()

    if args.sweep:
        sweep = warehouse.sweep(args.sweep)
        print(format_sweep(sweep, time_precision, cost_precision))
        if writer is not None:
            path = writer.write_sweep(sweep)
            print(f"\nSweep results saved to {path}")
    else:
        units = (
            args.units
            if args.units is not None
            else int(sim_params.get("default_batch_units", 200))
        )
        report = warehouse.simulate_batch(units)
        print(f"Warehouse {warehouse.name}: batch of {units} units\n")
        print(format_batch_report(report, time_precision, cost_precision))
        if writer is not None:
            path = writer.write_batch(report)
            print(f"\nBatch results saved to {path}")

    duration = time.time() - start_time
    logging.getLogger(__name__).debug("Evaluated in %.4f seconds", duration)


if __name__ == "__main__":
    main()
