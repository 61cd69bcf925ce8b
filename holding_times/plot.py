import matplotlib.pyplot as plt


def plot_holding_times(df, output_file, payload=None):
    """
    Plot tau_T and tau_F (in slots) against the MCS index, one line per bandwidth.

    Parameters:
    - df: holding time table as returned by to_frame or read_table
    - output_file: path of the figure (format taken from the extension)
    - payload: payload size to plot (default: the smallest in the table)
    """
    df = df.reset_index()
    if payload is None:
        payload = df['payload'].min()
    df = df[df['payload'] == payload]
    if df.empty:
        raise ValueError(f"no rows for payload {payload} bytes")

    plt.figure(figsize=(10, 6))
    colors = plt.cm.tab10.colors

    for i, bw in enumerate(sorted(df['bw'].unique())):
        rows = df[df['bw'] == bw].sort_values('mcs')
        color = colors[i % len(colors)]
        plt.plot(rows['mcs'], rows['tau_t_slots'], 'o-', color=color, label=f'{bw} MHz $\\tau_T$')
        plt.plot(rows['mcs'], rows['tau_f_slots'], '+--', color=color, label=f'{bw} MHz $\\tau_F$')

    plt.xlabel('MCS index')
    plt.ylabel('Holding time (slots)')
    plt.title(f'Channel holding times, {payload} B payload')
    plt.yscale('log')
    plt.grid(True, which='both', linestyle='--', alpha=0.7)
    plt.legend(ncol=2)
    plt.tight_layout()
    plt.savefig(output_file, bbox_inches='tight')
    plt.close()
