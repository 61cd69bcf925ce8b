from holding_times.cli import main


def test_default_sweep(capsys):
    assert main([]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert lines[0] == "mcs,bw,payload,data_bps,basic_bps,tau_t_slots,tau_f_slots"
    assert len(lines) == 37


def test_selected_grid(capsys):
    assert main(["--mcs", "0", "--mcs", "13", "--bw", "320", "--payload", "500"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(",")[:3] for line in lines[1:]] == [["0", "320", "500"], ["13", "320", "500"]]


def test_verbose_goes_to_stderr(capsys):
    assert main(["--mcs", "3", "--bw", "40", "--verbose"]) == 0
    captured = capsys.readouterr()
    assert "MODEL PARAMETERS FOR 40 MHz, MCS=3:" in captured.err
    assert "MODEL PARAMETERS" not in captured.out


def test_output_and_plot_files(tmp_path, capsys):
    csv_file = tmp_path / "tau.csv"
    png_file = tmp_path / "tau.png"
    assert main(["--output", str(csv_file), "--plot", str(png_file)]) == 0
    assert capsys.readouterr().out == ""
    assert len(csv_file.read_text().splitlines()) == 37
    assert png_file.exists()


def test_unsupported_mcs_exits_nonzero(capsys):
    assert main(["--mcs", "0", "--mcs", "14"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "mcs=14" in captured.err


def test_zero_slot_rejected(capsys):
    assert main(["--slot", "0"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "slot time" in captured.err


def test_unwritable_output(tmp_path, capsys):
    assert main(["--output", str(tmp_path / "missing" / "tau.csv")]) == 1
    assert "error:" in capsys.readouterr().err


def test_decimal_bandwidth_written_as_integer(capsys):
    assert main(["--mcs", "0", "--bw", "20.0", "--bw", "40"]) == 0
    lines = capsys.readouterr().out.splitlines()
    assert [line.split(",")[:2] for line in lines[1:]] == [["0", "20"], ["0", "40"]]


def test_fractional_bandwidth_rejected(capsys):
    assert main(["--mcs", "0", "--bw", "22.5"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "22.5 MHz" in captured.err


def test_importing_cli_keeps_matplotlib_backend():
    import importlib

    import matplotlib

    import holding_times.cli
    import holding_times.plot

    before = matplotlib.get_backend()
    matplotlib.use("svg")
    try:
        importlib.reload(holding_times.plot)
        importlib.reload(holding_times.cli)
        assert matplotlib.get_backend() == "svg"
    finally:
        matplotlib.use(before)
