"""Exceptions raised by cheap_ruler."""


class InvalidUnit(ValueError):
    """Raised when a ruler is requested for a unit name that is not in `UNIT_FACTORS`."""

    def __init__(self, units, accepted=()):
        self.units = units
        self.accepted = tuple(accepted)
        msg = f"unknown unit {units!r}"
        if self.accepted:
            msg += f"; expected one of: {', '.join(self.accepted)}"
        super().__init__(msg)


class InvalidGeometry(ValueError):
    """Raised when a point, line or bbox does not have the shape an operation needs."""
