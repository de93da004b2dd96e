from __future__ import annotations
from dataclasses import dataclass
from pathlib import Path
from typing import Dict
from common.units import Q_
from common.constants import LHV_UNIT
from common.models import FuelComposition
import pandas as pd


@dataclass(frozen=True)
class HeatingValues:
    as_received: float
    dry: float
    combustible: float

    def as_dict(self) -> Dict[str, float]:
        return {
            "asReceived": self.as_received,
            "dry": self.dry,
            "combustible": self.combustible,
        }

    def to_quantities(self) -> Dict[str, Q_]:
        return {k: Q_(v, LHV_UNIT) for k, v in self.as_dict().items()}


@dataclass(frozen=True)
class CombustionResult:
    fuel: FuelComposition
    dry_mass: float          # %
    combustible_mass: float  # %
    LHV: HeatingValues
    name: str = "fuel"


def format_report(result: CombustionResult, unit: str = LHV_UNIT) -> str:
    """
    Console report, two decimals. The coefficients are per percent of element,
    which puts the heating values in kJ/kg; pass unit="MJ/kg" to reproduce
    the label used by older hand-written reports of the same numbers.
    """
    lhv = result.LHV
    lines = [
        f"Dry Mass: {result.dry_mass:.2f}%",
        f"Combustible Mass: {result.combustible_mass:.2f}%",
        f"Lower Heat Value (As Received): {lhv.as_received:.2f} {unit}",
        f"Lower Heat Value (Dry): {lhv.dry:.2f} {unit}",
        f"Lower Heat Value (Combustible): {lhv.combustible:.2f} {unit}",
    ]
    return "\n".join(lines)


def write_results_csv(result: CombustionResult, outdir: str | Path, run_id: str) -> str:
    """
    Write a single-row <run_id>_fuel_summary.csv with the composition,
    mass bases and heating values. Returns the path as a string.
    """
    outdir = Path(outdir)
    outdir.mkdir(parents=True, exist_ok=True)
    path = outdir / f"{run_id}_fuel_summary.csv"

    row = {"name": result.name}
    row.update({f"{k}[%]": v for k, v in result.fuel.as_dict().items()})
    row["dry_mass[%]"] = result.dry_mass
    row["combustible_mass[%]"] = result.combustible_mass
    row.update({f"LHV_{k}[{LHV_UNIT}]": v for k, v in result.LHV.as_dict().items()})

    pd.DataFrame([row]).to_csv(path, index=False)
    return str(path)
