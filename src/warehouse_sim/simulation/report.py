from warehouse_sim.simulation.warehouse import BatchReport, SweepResult


def format_batch_report(
    report: BatchReport, time_precision: int = 1, cost_precision: int = 2
) -> str:
    """
    Render a batch report as plain text.

    Infinite figures print as 'inf' so an infeasible process stays visible.
    """
    lines = [
        f"Process {p.name}: Time {p.time_min:.{time_precision}f} min, "
        f"Cost {p.cost:.{cost_precision}f}"
        for p in report.processes
    ]
    lines.append("")
    lines.append(f"Total Batch Time: {report.total_time_min:.{time_precision}f} min")
    lines.append(f"Total Batch Cost: {report.total_cost:.{cost_precision}f}")
    if not report.feasible:
        lines.append("WARNING: batch cannot be produced with the current resources")
    return "\n".join(lines)


def format_sweep(
    sweep: SweepResult, time_precision: int = 1, cost_precision: int = 2
) -> str:
    header = f"{'Units':>8}  {'Time (min)':>14}  {'Cost':>14}  {'Cost/Unit':>10}"
    lines = [header, "-" * len(header)]
    for units, time_min, cost in zip(
        sweep.units.tolist(),
        sweep.total_time_min.tolist(),
        sweep.total_cost.tolist(),
    ):
        per_unit = cost / units if units > 0 else 0.0
        lines.append(
            f"{units:>8d}  {time_min:>14.{time_precision}f}  "
            f"{cost:>14.{cost_precision}f}  {per_unit:>10.{cost_precision}f}"
        )
    return "\n".join(lines)
