class HoldingTimeError(Exception):
    """Base class for every failure raised by the holding time tool."""


class InvalidConfiguration(HoldingTimeError, ValueError):
    """A configured value lies outside what the PHY tables support."""


class ArithmeticDegenerate(HoldingTimeError, ValueError):
    """A time constant that would make slot normalisation undefined."""


class SweepError(InvalidConfiguration):
    """Failure of a single sweep point, carrying the point that failed."""

    def __init__(self, point, cause):
        self.point = point
        self.cause = cause
        super().__init__(f"sweep point mcs={point.mcs} bw={point.bandwidth} "
                         f"payload={point.payload}: {cause}")
