from common.constants import C_HEAT, H_HEAT, O_HEAT, S_HEAT, TOTAL_PERCENT, BASIS_EPS
from common.exceptions import UndefinedHeatingValueError
from common.models import FuelComposition
from common.results import HeatingValues


def lhv_as_received(fuel: FuelComposition) -> float:
    return (C_HEAT * fuel.carbon + H_HEAT * fuel.hydrogen
            - O_HEAT * (fuel.oxygen - fuel.sulfur) - S_HEAT * fuel.water)


def _rebase(lhv: float, denominator: float, basis: str) -> float:
    if abs(denominator) < BASIS_EPS:
        raise UndefinedHeatingValueError(basis, denominator)
    return lhv / denominator


def compute_LHV(fuel: FuelComposition) -> HeatingValues:
    """
    Lower heating value on as-received, dry and combustible bases.

    Dry basis divides by the moisture-free fraction, combustible basis by the
    moisture- and ash-free fraction. Raises UndefinedHeatingValueError when
    either fraction is zero.
    """
    w = fuel.water / TOTAL_PERCENT
    a = fuel.ash / TOTAL_PERCENT

    lhv_ar = lhv_as_received(fuel)
    lhv_dry = _rebase(lhv_ar, 1 - w, "dry")
    lhv_comb = _rebase(lhv_ar, (1 - w) - a, "combustible")

    return HeatingValues(as_received=lhv_ar, dry=lhv_dry, combustible=lhv_comb)
