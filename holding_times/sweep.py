import itertools

from .errors import HoldingTimeError, SweepError
from .timing import SweepPoint, exchange_timing


def sweep_points(config):
    """Yield the sweep grid, MCS outermost and payload innermost."""
    for mcs, bandwidth, payload in itertools.product(config.mcs, config.bandwidths,
                                                     config.payloads):
        yield SweepPoint(mcs, bandwidth, payload)


def run_sweep(config, oracle, report=None):
    """Yield one ExchangeTiming per sweep point, in sweep order.

    The first failing point raises SweepError and ends the sweep.
    """
    for point in sweep_points(config):
        try:
            timing = exchange_timing(point, config, oracle)
        except HoldingTimeError as e:
            raise SweepError(point, e) from e
        if report is not None:
            report(timing)
        yield timing
