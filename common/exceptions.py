class FuelPropertiesError(ValueError):
    """Base class for errors raised by the fuel property model."""


class InvalidCompositionError(FuelPropertiesError):
    """The seven mass percentages sum to more than 100 %."""


class UndefinedHeatingValueError(FuelPropertiesError):
    """A heating-value basis has a zero (or near-zero) reference mass."""

    def __init__(self, basis: str, denominator: float):
        self.basis = basis
        self.denominator = denominator
        super().__init__(
            f"LHV on '{basis}' basis is undefined: reference mass fraction is {denominator!r}"
        )
