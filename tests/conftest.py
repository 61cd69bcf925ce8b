import pytest

from holding_times.errors import InvalidConfiguration
from holding_times.phy import WifiMode

# Fixed-rate PHY: 100 us preamble, 1 byte per 10 ns, any bandwidth
PREAMBLE = 100000
NS_PER_BYTE = 10
BASIC_RATE = 6000000
ACK_DURATION = 44000


class FixedRateOracle:
    def __init__(self, max_mcs=11):
        self.max_mcs = max_mcs
        self.durations = []

    def reference_rate(self, family, mcs):
        if mcs > self.max_mcs:
            raise InvalidConfiguration(f"MCS {mcs} unsupported")
        return BASIC_RATE

    def basic_mode(self, rate):
        return WifiMode("ofdm", rate=rate)

    def data_rate(self, family, mcs, bandwidth, guard_interval, nss):
        return (mcs + 1) * bandwidth * 1000000

    def tx_duration(self, size, tx_vector, band):
        self.durations.append((size, tx_vector))
        if tx_vector.mode.family == "ofdm":
            return ACK_DURATION
        return PREAMBLE + size * NS_PER_BYTE // (tx_vector.mode.mcs + 1)


@pytest.fixture
def fake_oracle():
    return FixedRateOracle()
