import json
from pathlib import Path
from typing import Any


def _load_json(final_path: Path) -> dict[str, Any]:
    with open(final_path) as f:
        data = json.load(f)
        if not isinstance(data, dict):
            raise TypeError(f"Expected dict from {final_path}, got {type(data)}")
        return data


def load_simulation_config(config_path: str | None = None) -> dict[str, Any]:
    """
    Loads the simulation runtime configuration (costing and reporting).
    If no path is provided, looks for simulation_config.json in the config directory.
    """
    if config_path is None:
        final_path = Path(__file__).parent / "simulation_config.json"
    else:
        final_path = Path(config_path)
    return _load_json(final_path)


def load_warehouse_definition(definition_path: str | None = None) -> dict[str, Any]:
    """
    Loads the static warehouse definition (Resources, Processes, Operations).
    If no path is provided, looks for warehouse_definition.json in the config directory.
    """
    if definition_path is None:
        final_path = Path(__file__).parent / "warehouse_definition.json"
    else:
        final_path = Path(definition_path)
    return _load_json(final_path)
