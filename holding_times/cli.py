"""Print tau_T / tau_F slot values for an MCS x bandwidth x payload grid.

    python -m holding_times --bw 20 --bw 160 --payload 500 --payload 1500 --verbose
"""

import argparse
import sys

from .config import SweepConfig, us
from .errors import HoldingTimeError
from .output import print_report, to_frame, write_table
from .phy import TablePhyOracle
from .plot import plot_holding_times
from .sweep import run_sweep


def bandwidth(value):
    """Parse a bandwidth in MHz, keeping integral widths as int ('20.0' -> 20)."""
    bw = float(value)
    return int(bw) if bw.is_integer() else bw


def parse_args(argv=None):
    defaults = SweepConfig()
    ap = argparse.ArgumentParser(description="Compute 802.11 channel holding times in slots")
    ap.add_argument("--mcs", type=int, action="append", help="MCS index (repeatable, default 0..11)")
    ap.add_argument("--bw", type=bandwidth, action="append", help="bandwidth in MHz (repeatable, default 20 40 80)")
    ap.add_argument("--payload", type=int, action="append", help="payload in bytes (repeatable, default 1500)")
    ap.add_argument("--family", choices=["eht", "he"], default=defaults.family)
    ap.add_argument("--overhead", type=int, default=defaults.overhead, help="MAC and upper layer header bytes")
    ap.add_argument("--ack-size", type=int, default=defaults.ack_size, help="ACK frame size in bytes")
    ap.add_argument("--ack-bw", type=int, default=defaults.ack_bandwidth, help="ACK bandwidth in MHz")
    ap.add_argument("--gi", type=int, default=defaults.guard_interval, help="guard interval in ns")
    ap.add_argument("--nss", type=int, default=defaults.nss, help="spatial streams of the data frame")
    ap.add_argument("--band", default=defaults.band, help="2.4GHz, 5GHz or 6GHz")
    ap.add_argument("--sifs", type=float, default=16, help="SIFS in us")
    ap.add_argument("--difs", type=float, default=34, help="DIFS in us")
    ap.add_argument("--slot", type=float, default=9, help="slot time in us")
    ap.add_argument("--output", default=None, help="CSV file (default stdout)")
    ap.add_argument("--plot", default=None, help="also save a figure of the table to this file")
    ap.add_argument("--verbose", action="store_true", help="print model parameters to stderr")
    return ap.parse_args(argv)


def build_config(args):
    defaults = SweepConfig()
    return SweepConfig(
        mcs=args.mcs or defaults.mcs,
        bandwidths=args.bw or defaults.bandwidths,
        payloads=args.payload or defaults.payloads,
        family=args.family,
        overhead=args.overhead,
        ack_size=args.ack_size,
        ack_bandwidth=args.ack_bw,
        guard_interval=args.gi,
        nss=args.nss,
        band=args.band,
        sifs=us(args.sifs),
        difs=us(args.difs),
        slot=us(args.slot),
        verbose=args.verbose,
    )


def main(argv=None):
    args = parse_args(argv)
    try:
        config = build_config(args)
        report = print_report if config.verbose else None
        # Sweep fully before writing anything
        df = to_frame(run_sweep(config, TablePhyOracle(), report=report))
        write_table(df, args.output if args.output else sys.stdout)
        if args.plot:
            plot_holding_times(df, args.plot)
            print(f"Plot saved as '{args.plot}'", file=sys.stderr)
    except (HoldingTimeError, OSError) as e:
        print(f"error: {e}", file=sys.stderr)
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
