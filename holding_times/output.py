import sys

import pandas as pd

from .phy import describe_mode

COLUMNS = ['mcs', 'bw', 'payload', 'data_bps', 'basic_bps', 'tau_t_slots', 'tau_f_slots']
KEY_COLUMNS = ['mcs', 'bw', 'payload']


def to_frame(timings):
    """Collect sweep results into a DataFrame with the CSV column layout."""
    return pd.DataFrame([t.as_record() for t in timings], columns=COLUMNS)


def write_table(df, output_file):
    """Write the holding time table as CSV to a path or an open text stream."""
    df.to_csv(output_file, index=False, lineterminator='\n')


def read_table(input_file):
    """Load a holding time table, indexed by (mcs, bw, payload)."""
    df = pd.read_csv(input_file)
    missing = [c for c in COLUMNS if c not in df.columns]
    if missing:
        raise ValueError(f"{input_file}: missing columns {missing}")
    return df.set_index(KEY_COLUMNS)


def format_us(duration):
    """Format integer nanoseconds as microseconds."""
    return f"{duration / 1000:g} us"


def print_report(timing, file=None):
    """Print the model parameters of one sweep point."""
    file = file if file is not None else sys.stderr
    point = timing.point
    d = timing.durations
    data_mode = timing.data_frame.mode
    ack_mode = timing.ack_frame.mode
    print(f"MODEL PARAMETERS FOR {point.bandwidth} MHz, MCS={point.mcs}:", file=file)
    print(f"Data mode: {data_mode.unique_name} ({describe_mode(data_mode)})", file=file)
    print(f"PHY rate for data frame (bps): {timing.data_rate}", file=file)
    print(f"Ack mode: {ack_mode.unique_name}", file=file)
    print(f"PHY rate for ACK frame (bps): {timing.basic_rate}", file=file)
    print("Data frame:", file=file)
    print(f"\tPSDU size: {timing.data_frame.size}", file=file)
    print(f"\ttx duration: {format_us(d.data_tx)}", file=file)
    print("ACK:", file=file)
    print(f"\tPSDU size: {timing.ack_frame.size}", file=file)
    print(f"\ttx duration: {format_us(d.ack_tx)}", file=file)
    print(f"SIFS: {format_us(d.sifs)}", file=file)
    print(f"DIFS: {format_us(d.difs)}", file=file)
    print(f"Successful tx holding time: {format_us(timing.tau_t)}", file=file)
    print(f"Successful tx holding time (in slots): {timing.tau_t_slots:.6f}", file=file)
    print(f"Failed (collided) tx holding time: {format_us(timing.tau_f)}", file=file)
    print(f"Failed (collided) tx holding time (in slots): {timing.tau_f_slots:.6f}\n", file=file)
