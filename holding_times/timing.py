from dataclasses import dataclass

from .errors import ArithmeticDegenerate
from .phy import TxVector, WifiMode


@dataclass(frozen=True)
class SweepPoint:
    mcs: int
    bandwidth: int  # in MHz
    payload: int    # in bytes


@dataclass(frozen=True)
class FrameSpec:
    mode: WifiMode
    size: int  # PSDU size in bytes


@dataclass(frozen=True)
class Durations:
    data_tx: int  # in ns
    ack_tx: int   # in ns
    sifs: int     # in ns
    difs: int     # in ns


@dataclass(frozen=True)
class ExchangeTiming:
    point: SweepPoint
    data_frame: FrameSpec
    ack_frame: FrameSpec
    data_rate: int   # in bps
    basic_rate: int  # in bps
    durations: Durations
    tau_t: int       # in ns
    tau_f: int       # in ns
    tau_t_slots: float
    tau_f_slots: float

    def as_record(self):
        """Return the CSV row for this point."""
        return {
            'mcs': self.point.mcs,
            'bw': self.point.bandwidth,
            'payload': self.point.payload,
            'data_bps': self.data_rate,
            'basic_bps': self.basic_rate,
            'tau_t_slots': self.tau_t_slots,
            'tau_f_slots': self.tau_f_slots,
        }


def to_slots(duration, slot):
    """Express a duration as a (fractional) number of slot times."""
    if slot <= 0:
        raise ArithmeticDegenerate(f"slot time must be positive, got {slot} ns")
    return duration / slot


def calculate_success_time(data_tx, sifs, ack_tx, difs):
    """Calculate the channel holding time of a successful exchange."""
    return data_tx + sifs + ack_tx + difs


def calculate_collision_time(data_tx, difs):
    """Calculate the channel holding time of a collided exchange."""
    return data_tx + difs


def exchange_timing(point, config, oracle):
    """Compute tau_T and tau_F for one sweep point.

    The data frame is sent with the swept MCS and bandwidth; the ACK goes out
    at the OFDM rate matching the data MCS's non-HT reference rate, on the
    configured ACK bandwidth. Oracle errors are not caught here.
    """
    data_mode = WifiMode(config.family, mcs=point.mcs)
    data_frame = FrameSpec(data_mode, point.payload + config.overhead)
    data_vector = TxVector(data_mode, point.bandwidth, config.guard_interval, nss=config.nss)

    basic_rate = oracle.reference_rate(config.family, point.mcs)
    ack_mode = oracle.basic_mode(basic_rate)
    ack_frame = FrameSpec(ack_mode, config.ack_size)
    ack_vector = TxVector(ack_mode, config.ack_bandwidth, config.guard_interval, nss=1)

    data_tx = oracle.tx_duration(data_frame.size, data_vector, config.band)
    ack_tx = oracle.tx_duration(ack_frame.size, ack_vector, config.band)
    data_rate = oracle.data_rate(config.family, point.mcs, point.bandwidth,
                                 config.guard_interval, config.nss)

    tau_t = calculate_success_time(data_tx, config.sifs, ack_tx, config.difs)
    tau_f = calculate_collision_time(data_tx, config.difs)

    return ExchangeTiming(
        point=point,
        data_frame=data_frame,
        ack_frame=ack_frame,
        data_rate=data_rate,
        basic_rate=basic_rate,
        durations=Durations(data_tx, ack_tx, config.sifs, config.difs),
        tau_t=tau_t,
        tau_f=tau_f,
        tau_t_slots=to_slots(tau_t, config.slot),
        tau_f_slots=to_slots(tau_f, config.slot),
    )
