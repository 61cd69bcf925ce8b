"""PHY rate and duration tables for OFDM (802.11a), HE (802.11ax) and EHT (802.11be).

The timing model only needs four numbers from the PHY: a reference rate, the
OFDM mode matching it, a nominal data rate and the on-air duration of a PSDU.
Those are exposed through the ``PhyOracle`` protocol so that tests and other
table sources can stand in for ``TablePhyOracle``.

All durations are integer nanoseconds and all rates are bits per second.
"""

import math
from dataclasses import dataclass
from typing import Optional, Protocol

import numpy as np

from .config import us
from .errors import InvalidConfiguration

# (bits per subcarrier, coding rate numerator, coding rate denominator)
MODULATIONS = [
    (1, 1, 2),    # BPSK 1/2
    (2, 1, 2),    # QPSK 1/2
    (2, 3, 4),    # QPSK 3/4
    (4, 1, 2),    # 16-QAM 1/2
    (4, 3, 4),    # 16-QAM 3/4
    (6, 2, 3),    # 64-QAM 2/3
    (6, 3, 4),    # 64-QAM 3/4
    (6, 5, 6),    # 64-QAM 5/6
    (8, 3, 4),    # 256-QAM 3/4
    (8, 5, 6),    # 256-QAM 5/6
    (10, 3, 4),   # 1024-QAM 3/4
    (10, 5, 6),   # 1024-QAM 5/6
    (12, 3, 4),   # 4096-QAM 3/4
    (12, 5, 6),   # 4096-QAM 5/6
]

MODULATION_NAMES = ["BPSK", "QPSK", "QPSK", "16-QAM", "16-QAM", "64-QAM", "64-QAM",
                    "64-QAM", "256-QAM", "256-QAM", "1024-QAM", "1024-QAM",
                    "4096-QAM", "4096-QAM"]

# Data subcarriers of the full-band RU (242, 484, 996, 2x996, 4x996 tones)
DATA_SUBCARRIERS = {20: 234, 40: 468, 80: 980, 160: 1960, 320: 3920}

MAX_MCS = {"he": 11, "eht": 13}
BANDWIDTHS = {"he": (20, 40, 80, 160), "eht": (20, 40, 80, 160, 320)}
GUARD_INTERVALS = (800, 1600, 3200)  # in ns
MAX_NSS = {"he": 8, "eht": 8}

# Non-HT reference rate by (bits per subcarrier, coding rate)
NON_HT_REFERENCE_RATES = {
    (1, 1, 2): 6000000,
    (2, 1, 2): 12000000,
    (2, 3, 4): 18000000,
    (4, 1, 2): 24000000,
    (4, 3, 4): 36000000,
    (6, 2, 3): 48000000,
}
MAX_REFERENCE_RATE = 54000000

# 802.11a rates at 20 MHz, bits per 4 us symbol
OFDM_RATES = {
    6000000: 24,
    9000000: 36,
    12000000: 48,
    18000000: 72,
    24000000: 96,
    36000000: 144,
    48000000: 192,
    54000000: 216,
}
OFDM_BANDWIDTHS = (20, 40, 80, 160, 320)  # wider channels carry non-HT duplicates

# Field durations
OFDM_PREAMBLE = us(16)     # L-STF + L-LTF
OFDM_SIGNAL = us(4)
OFDM_SYMBOL = us(4)
LEGACY_PREAMBLE = us(20)   # L-STF + L-LTF + L-SIG
RL_SIG = us(4)
HE_SIG_A = us(8)
U_SIG = us(8)
EHT_SIG_SYMBOL = us(4)
HE_STF = us(4)
HE_LTF = us(8)             # per HE/EHT-LTF symbol, independent of the data GI
DATA_SYMBOL = 12800        # HE/EHT OFDM symbol without GI, in ns
SIGNAL_EXTENSION = {"2.4GHz": us(6), "5GHz": 0, "6GHz": 0}

SERVICE_BITS = 16
TAIL_BITS = 6

# Non-OFDMA EHT-SIG: common field (20 + CRC 4 + tail 6) and one user field
# (22 + CRC 4 + tail 6), sent at EHT-SIG MCS 0 (26 bits per symbol)
EHT_SIG_BITS = 30 + 32
EHT_SIG_BITS_PER_SYMBOL = 26


@dataclass(frozen=True)
class WifiMode:
    family: str                 # "ofdm", "he" or "eht"
    mcs: Optional[int] = None   # HE/EHT only
    rate: Optional[int] = None  # OFDM only, in bps

    @property
    def unique_name(self):
        if self.family == "ofdm":
            return f"OfdmRate{self.rate // 1000000}Mbps"
        return f"{self.family.capitalize()}Mcs{self.mcs}"

    def __str__(self):
        return self.unique_name


@dataclass(frozen=True)
class TxVector:
    mode: WifiMode
    bandwidth: int          # in MHz
    guard_interval: int     # in ns
    nss: int = 1


class PhyOracle(Protocol):
    def reference_rate(self, family: str, mcs: int) -> int: ...

    def basic_mode(self, rate: int) -> WifiMode: ...

    def data_rate(self, family: str, mcs: int, bandwidth: int,
                  guard_interval: int, nss: int) -> int: ...

    def tx_duration(self, size: int, tx_vector: TxVector, band: str) -> int: ...


def check_mcs(family, mcs):
    if family not in MAX_MCS:
        raise InvalidConfiguration(f"unsupported coding scheme family {family!r}")
    if not 0 <= mcs <= MAX_MCS[family]:
        raise InvalidConfiguration(f"{family.upper()} MCS {mcs} is outside 0..{MAX_MCS[family]}")
    return MODULATIONS[mcs]


def check_tx_parameters(family, bandwidth, guard_interval, nss):
    if bandwidth not in BANDWIDTHS[family]:
        raise InvalidConfiguration(f"{family.upper()} does not support {bandwidth} MHz, "
                                   f"expected one of {BANDWIDTHS[family]}")
    if guard_interval not in GUARD_INTERVALS:
        raise InvalidConfiguration(f"guard interval {guard_interval} ns not in {GUARD_INTERVALS}")
    if not 1 <= nss <= MAX_NSS[family]:
        raise InvalidConfiguration(f"{nss} spatial streams not supported by {family.upper()}")


def data_bits_per_symbol(mcs, bandwidth, nss):
    """Calculate N_DBPS of one HE/EHT data symbol."""
    bits, num, den = MODULATIONS[mcs]
    return int(np.floor(DATA_SUBCARRIERS[bandwidth] * bits * nss * num / den))


def symbol_duration(guard_interval):
    return DATA_SYMBOL + guard_interval


def eht_sig_duration():
    return math.ceil(EHT_SIG_BITS / EHT_SIG_BITS_PER_SYMBOL) * EHT_SIG_SYMBOL


class TablePhyOracle:
    """PHY oracle backed by the 802.11a/ax/be modulation tables."""

    def reference_rate(self, family, mcs):
        modulation = check_mcs(family, mcs)
        return NON_HT_REFERENCE_RATES.get(modulation, MAX_REFERENCE_RATE)

    def basic_mode(self, rate):
        if rate not in OFDM_RATES:
            raise InvalidConfiguration(f"no OFDM mode carries {rate} bps")
        return WifiMode("ofdm", rate=rate)

    def data_rate(self, family, mcs, bandwidth, guard_interval, nss):
        if family == "ofdm":
            raise InvalidConfiguration("OFDM modes are addressed by rate, not MCS")
        check_mcs(family, mcs)
        check_tx_parameters(family, bandwidth, guard_interval, nss)
        ndbps = data_bits_per_symbol(mcs, bandwidth, 1)
        # per-stream rate ceil(N_DBPS / T_SYM), T_SYM in ns, scaled by the stream count
        return nss * -(-ndbps * 1000000000 // symbol_duration(guard_interval))

    def tx_duration(self, size, tx_vector, band):
        if band not in SIGNAL_EXTENSION:
            raise InvalidConfiguration(f"unknown band {band!r}")
        if size <= 0:
            raise InvalidConfiguration(f"PSDU size must be positive, got {size}")
        mode = tx_vector.mode
        if mode.family == "ofdm":
            duration = self.ofdm_duration(size, tx_vector)
        elif mode.family in ("he", "eht"):
            duration = self.he_duration(size, tx_vector)
        else:
            raise InvalidConfiguration(f"unsupported coding scheme family {mode.family!r}")
        return duration + SIGNAL_EXTENSION[band]

    def ofdm_duration(self, size, tx_vector):
        rate = tx_vector.mode.rate
        if rate not in OFDM_RATES:
            raise InvalidConfiguration(f"no OFDM mode carries {rate} bps")
        if tx_vector.bandwidth not in OFDM_BANDWIDTHS:
            raise InvalidConfiguration(f"OFDM does not support {tx_vector.bandwidth} MHz")
        bits = SERVICE_BITS + 8 * size + TAIL_BITS
        symbols = math.ceil(bits / OFDM_RATES[rate])
        return OFDM_PREAMBLE + OFDM_SIGNAL + symbols * OFDM_SYMBOL

    def he_duration(self, size, tx_vector):
        mode = tx_vector.mode
        check_mcs(mode.family, mode.mcs)
        check_tx_parameters(mode.family, tx_vector.bandwidth, tx_vector.guard_interval,
                            tx_vector.nss)
        gi = tx_vector.guard_interval
        preamble = LEGACY_PREAMBLE + RL_SIG + HE_STF + tx_vector.nss * HE_LTF
        if mode.family == "eht":
            preamble += U_SIG + eht_sig_duration()
        else:
            preamble += HE_SIG_A
        # LDPC coded, no tail bits
        ndbps = data_bits_per_symbol(mode.mcs, tx_vector.bandwidth, tx_vector.nss)
        symbols = math.ceil((SERVICE_BITS + 8 * size) / ndbps)
        return preamble + symbols * symbol_duration(gi)


def describe_mode(mode):
    """Human readable modulation of a mode, e.g. '64-QAM 5/6'."""
    if mode.family == "ofdm":
        return f"{mode.rate / 1e6:g} Mbps non-HT"
    bits, num, den = MODULATIONS[mode.mcs]
    return f"{MODULATION_NAMES[mode.mcs]} {num}/{den}"
