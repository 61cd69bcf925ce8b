from dataclasses import dataclass
from typing import Tuple

from .errors import ArithmeticDegenerate, InvalidConfiguration

NS_PER_US = 1000


def us(value):
    """Convert microseconds to integer nanoseconds."""
    return int(round(value * NS_PER_US))


# Frame size policy
MAC_AND_UPPER_LAYER_HDR_SIZE = 42  # bytes, packet socket client path
ACK_SIZE = 14                      # bytes, FC + duration + RA + FCS

# 5 GHz OFDM timing
SIFS = us(16)
DIFS = us(34)  # SIFS + 2 * slot
SLOT = us(9)

BANDS = ("2.4GHz", "5GHz", "6GHz")


@dataclass(frozen=True)
class SweepConfig:
    mcs: Tuple[int, ...] = tuple(range(12))
    bandwidths: Tuple[int, ...] = (20, 40, 80)  # in MHz
    payloads: Tuple[int, ...] = (1500,)         # in bytes
    family: str = "eht"
    overhead: int = MAC_AND_UPPER_LAYER_HDR_SIZE
    ack_size: int = ACK_SIZE
    ack_bandwidth: int = 20       # in MHz
    guard_interval: int = 800     # in ns
    nss: int = 1
    band: str = "5GHz"
    sifs: int = SIFS              # in ns
    difs: int = DIFS              # in ns
    slot: int = SLOT              # in ns
    verbose: bool = False

    def __post_init__(self):
        # Sets may arrive as lists from the command line
        for name in ("mcs", "bandwidths", "payloads"):
            values = tuple(getattr(self, name))
            if not values:
                raise InvalidConfiguration(f"{name} must not be empty")
            object.__setattr__(self, name, values)

        if self.slot <= 0:
            raise ArithmeticDegenerate(f"slot time must be positive, got {self.slot} ns")
        if any(m < 0 for m in self.mcs):
            raise InvalidConfiguration(f"MCS indices must be >= 0, got {self.mcs}")
        if any(p <= 0 for p in self.payloads):
            raise InvalidConfiguration(f"payload sizes must be positive, got {self.payloads}")
        if self.overhead < 0:
            raise InvalidConfiguration(f"overhead must be >= 0, got {self.overhead}")
        if self.ack_size <= 0:
            raise InvalidConfiguration(f"ACK size must be positive, got {self.ack_size}")
        if self.sifs < 0 or self.difs < 0:
            raise InvalidConfiguration("SIFS and DIFS must be >= 0")
        if self.band not in BANDS:
            raise InvalidConfiguration(f"unknown band {self.band!r}, expected one of {BANDS}")

    @property
    def size(self):
        """Number of points in the configured grid."""
        return len(self.mcs) * len(self.bandwidths) * len(self.payloads)
