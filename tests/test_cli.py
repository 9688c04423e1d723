import os

import pytest

import sigmafit_cli
from sigmafit.report import format_value


def test_select_medium_prints_derivation_and_sigma(capsys):
    assert sigmafit_cli.main(["select", "--min", "10", "--max", "30", "--mode", "medium"]) == 0
    out = capsys.readouterr().out
    assert "mode = Medium" in out
    assert "average = (min+max)/2 = 20" in out
    assert "from = average - [(max-min)/4] = 15" in out
    assert "to = average + [(max-min)/4] = 25" in out
    assert "ratio = 70.00%" in out
    assert "Deviation Value = " in out
    assert "mean_value (x1000) = 20000" in out
    assert "Deviation Value (x1000 & Rounded) = " in out


def test_calculate_defaults_are_unreachable(capsys):
    # defaults cover the whole support, so the ratio is always 100%
    assert sigmafit_cli.main(["calculate"]) == 1
    out = capsys.readouterr().out
    assert "ratio = 60.00%" in out
    assert "[ERROR] CAN NOT find the solution" in out


def test_calculate_with_band(capsys):
    argv = ["calculate", "--min", "10", "--max", "30", "--mean_value", "10",
            "--from", "10", "--to", "20", "--ratio", "60", "--verbose"]
    assert sigmafit_cli.main(argv) == 0
    out = capsys.readouterr().out
    assert "from = 10" in out
    assert "to = 20" in out
    assert "Achieved ratio = 60.000000%" in out
    assert "converged" in out


def test_unknown_mode_lists_presets(capsys):
    assert sigmafit_cli.main(["select", "--mode", "extreme"]) == 1
    out = capsys.readouterr().out
    assert out.startswith("[ERROR]")
    assert "super_low, low, medium, high, super_high" in out


def test_invalid_request_reports_error(capsys):
    assert sigmafit_cli.main(["calculate", "--min", "30", "--max", "10"]) == 1
    assert "[ERROR] min (30) must not exceed max (10)" in capsys.readouterr().out


def test_missing_mode_lists_presets(capsys):
    assert sigmafit_cli.main(["select"]) == 1
    out = capsys.readouterr().out
    assert out.startswith("[ERROR] \"mode\" MUST BE one of values: ")
    assert "super_low, low, medium, high, super_high" in out


def test_unknown_subcommand_is_a_usage_error():
    with pytest.raises(SystemExit) as excinfo:
        sigmafit_cli.main(["estimate"])
    assert excinfo.value.code == 2


def test_large_mean_output(capsys):
    argv = ["calculate", "--min", "1000", "--max", "3000", "--mean_value", "1234.5678",
            "--from", "1000", "--to", "1500", "--ratio", "60"]
    assert sigmafit_cli.main(argv) == 0
    out = capsys.readouterr().out
    assert "mean_value = 1234.5678" in out
    assert "mean_value (x1000) = " + format_value(1234.5678 * 1000) in out
    assert "e+06" not in out


def test_show_mass_table(capsys):
    assert sigmafit_cli.main(["select", "--min", "0", "--max", "8", "--mode", "medium", "--show-mass"]) == 0
    out = capsys.readouterr().out
    assert "  n: value (%)" in out
    assert "  4: " in out and "<--" in out
    assert "Mass in [2, 6]: 70.0000%" in out


def test_log_dir_receives_log_file(tmp_path, capsys):
    log_dir = tmp_path / "logs"
    argv = ["select", "--mode", "low", "--log-dir", str(log_dir), "--log-level", "DEBUG"]
    assert sigmafit_cli.main(argv) == 0
    files = os.listdir(log_dir)
    assert len(files) == 1 and files[0].startswith("sigma_fit_")
    content = (log_dir / files[0]).read_text()
    assert "Solved sigma=" in content
    assert "Bisection bracket" in content
