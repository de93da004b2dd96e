import logging
from common.logging_utils import trace_calls
from common.models import FuelComposition
from common.results import CombustionResult

log = logging.getLogger(__name__)

class Combustor:
    def __init__(self, fuel: FuelComposition, name: str = "fuel"):
        self.fuel = fuel
        self.name = name

    @trace_calls(values=True)
    def run(self) -> CombustionResult:
        fuel = self.fuel
        ctx = {"fuel": self.name, "step": "run"}

        # 1) Mass bases
        dry = fuel.dry_mass()
        comb = fuel.combustible_mass()
        log.debug(f"dry={dry:.4g}% combustible={comb:.4g}%", extra=ctx)

        # 2) Heating values, errors propagate to the caller
        lhv = fuel.lower_heating_values()
        log.info(f"Combustion results: {lhv}", extra=ctx)

        return CombustionResult(
            fuel             = fuel,
            dry_mass         = dry,
            combustible_mass = comb,
            LHV              = lhv,
            name             = self.name,
        )
