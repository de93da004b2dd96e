from typing import Dict, Any, Tuple
import yaml
from pint.errors import PintError
from common.units import Q_
from common.models import FuelComposition

SAMPLE_FUEL = FuelComposition(
    hydrogen=3.2,
    carbon=54.4,
    sulfur=2.3,
    nitrogen=1.0,
    oxygen=3.1,
    water=20.0,
    ash=16.0,
)


def _q(node: Any) -> Q_:
    if isinstance(node, dict) and "value" in node and "unit" in node:
        unit = str(node["unit"])
        if unit in ("%", "pct"):
            unit = "percent"
        if unit in ("dimensionless", "1"):
            unit = ""
        try:
            return Q_(node["value"], unit)
        except PintError as e:
            raise ValueError(f"Invalid quantity {node!r}: {e}") from e
    if isinstance(node, (int, float)) and not isinstance(node, bool):
        return Q_(node, "percent")
    raise ValueError(f"Invalid quantity format: {node!r}")


def _percent(node: Any) -> float:
    q = _q(node)
    if not q.dimensionless:
        raise ValueError(f"Mass fraction must be dimensionless, got {q.units}")
    return float(q.to("percent").magnitude)


def load_fuel(path: str) -> Tuple[str, FuelComposition]:
    with open(path, "r", encoding="utf-8") as fh:
        try:
            doc = yaml.safe_load(fh)
        except yaml.YAMLError as e:
            raise ValueError(f"{path}: invalid YAML: {e}") from e

    if not isinstance(doc, dict) or "composition" not in doc:
        raise KeyError(f"{path}: 'composition' is required")

    node = doc["composition"]
    if not isinstance(node, dict):
        raise ValueError(f"{path}: 'composition' must be a mapping, got {type(node).__name__}")

    comp: Dict[str, float] = {k: _percent(v) for k, v in node.items()}
    name = str(doc.get("name", "fuel"))
    return name, FuelComposition.from_mapping(comp)
