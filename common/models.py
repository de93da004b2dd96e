import math
from dataclasses import dataclass, fields
from typing import Any, Mapping
from common.constants import COMPONENTS, TOTAL_PERCENT
from common.exceptions import InvalidCompositionError

@dataclass(frozen=True)
class FuelComposition:
    """
    Elemental (ultimate) analysis of a solid or liquid fuel, as-received.

    All fields are mass percentages. The only constraint is that the seven
    components sum to at most 100 %; it is checked on every construction.
    """
    hydrogen: float   # %
    carbon: float     # %
    sulfur: float     # %
    nitrogen: float   # %
    oxygen: float     # %
    water: float      # %
    ash: float        # %

    def __post_init__(self):
        bad = [f.name for f in fields(self) if not math.isfinite(getattr(self, f.name))]
        if bad:
            raise InvalidCompositionError(f"Components must be finite numbers: {bad}")
        total = self.total()
        if not total <= TOTAL_PERCENT:
            raise InvalidCompositionError(
                f"The sum of components must not exceed {TOTAL_PERCENT:g}% (got {total!r})"
            )

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> "FuelComposition":
        missing = [k for k in COMPONENTS if k not in data]
        unknown = [k for k in data if k not in COMPONENTS]
        if missing or unknown:
            raise InvalidCompositionError(
                f"composition keys: missing={missing}, unknown={unknown}"
            )
        return cls(**{k: float(data[k]) for k in COMPONENTS})

    def as_dict(self) -> dict[str, float]:
        return {f.name: getattr(self, f.name) for f in fields(self)}

    def total(self) -> float:
        return (self.hydrogen + self.carbon + self.sulfur + self.nitrogen
                + self.oxygen + self.water + self.ash)

    def dry_mass(self) -> float:
        """Percent of fuel mass left after removing moisture and ash."""
        return TOTAL_PERCENT - self.water - self.ash

    def combustible_mass(self) -> float:
        """Dry mass minus oxygen, nitrogen and sulfur."""
        return self.dry_mass() - (self.oxygen + self.nitrogen + self.sulfur)

    def lower_heating_values(self):
        from combustion.heat import compute_LHV
        return compute_LHV(self)
