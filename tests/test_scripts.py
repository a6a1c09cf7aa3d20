import json

import pandas as pd
import pytest

from src.scripts import batch_estimate, estimate


def test_estimate_cli_prints_result(capsys):
    rc = estimate.main(
        [
            "--home_value", "350000",
            "--state", "TX",
            "--home_type", "single-family",
            "--coverage_level", "standard",
            "--deductible", "1000",
        ]
    )
    assert rc == 0
    out = capsys.readouterr().out
    assert "$158 per month" in out
    assert "$1,899" in out
    assert "Standard (HO-3)" in out
    assert "Additional Living Expenses" in out


def test_estimate_cli_writes_json(tmp_path, capsys):
    out_path = tmp_path / "nested" / "estimate.json"
    estimate.main(
        [
            "--home_value", "500000",
            "--state", "CA",
            "--home_type", "condo",
            "--coverage_level", "basic",
            "--deductible", "5000",
            "--out_path", str(out_path),
        ]
    )
    data = json.loads(out_path.read_text(encoding="utf-8"))
    assert data["annual_premium"] == 896
    assert data["monthly_premium"] == 75
    assert "[OK]" in capsys.readouterr().out


def test_estimate_cli_invalid_enum_exits_2(capsys):
    with pytest.raises(SystemExit) as exc:
        estimate.main(["--home_value", "350000", "--state", "XX"])
    assert exc.value.code == 2
    assert "state" in capsys.readouterr().err


def test_estimate_cli_defaults_warn(capsys):
    estimate.main([])
    captured = capsys.readouterr()
    assert "$1,899" in captured.out
    assert "[WARN]" in captured.err


def test_estimate_frame_keeps_going_on_invalid_rows():
    df = pd.DataFrame(
        [
            {"home_value": "350000", "state": "TX", "home_type": "single-family", "coverage_level": "standard", "deductible": "1000"},
            {"home_value": "200000", "state": "FL", "home_type": "boat", "coverage_level": "premium", "deductible": "500"},
            {"home_value": "", "state": "OH", "home_type": "condo", "coverage_level": "basic", "deductible": "2500"},
        ]
    )
    out = batch_estimate.estimate_frame(df)
    assert list(out.columns[-4:]) == batch_estimate.OUTPUT_COLUMNS
    assert out.loc[0, "annual_premium"] == 1899
    assert out.loc[0, "monthly_premium"] == 158
    assert out.loc[0, "error"] == ""
    assert pd.isna(out.loc[1, "annual_premium"])
    assert "home_type" in out.loc[1, "error"]
    assert out.loc[2, "annual_premium"] == 0
    assert "home_value" in out.loc[2, "warnings"]


def test_batch_cli_csv_roundtrip(tmp_path, capsys):
    in_path = tmp_path / "inputs.csv"
    pd.DataFrame(
        [
            {"homeValue": 350000, "state": "TX", "homeType": "single-family", "coverageLevel": "standard", "deductible": 1000},
            {"homeValue": 500000, "state": "CA", "homeType": "condo", "coverageLevel": "basic", "deductible": 5000},
        ]
    ).to_csv(in_path, index=False)
    out_path = tmp_path / "out" / "estimates.csv"

    batch_estimate.main(["--in_path", str(in_path), "--out_path", str(out_path)])

    out = pd.read_csv(out_path)
    assert out["annual_premium"].tolist() == [1899, 896]
    assert out["monthly_premium"].tolist() == [158, 75]
    assert "Errors: 0" in capsys.readouterr().out


def test_batch_rejects_unknown_format(tmp_path):
    bad = tmp_path / "inputs.xlsx"
    bad.write_text("x", encoding="utf-8")
    with pytest.raises(ValueError):
        batch_estimate.main(["--in_path", str(bad), "--out_path", str(tmp_path / "o.csv")])


@pytest.mark.parametrize("rate", ["-3.5", "nan", "inf"])
def test_estimate_cli_bad_base_rate_exits_2(rate, capsys):
    with pytest.raises(SystemExit) as exc:
        estimate.main(["--base_rate_per_thousand", rate])
    assert exc.value.code == 2
    captured = capsys.readouterr()
    assert "base_rate_per_thousand" in captured.err
    assert "per month" not in captured.out


def test_batch_default_output_goes_to_reports_dir(tmp_path):
    from src.utils.config import get_paths

    out = batch_estimate._default_out_path(tmp_path / "inputs.csv")
    assert out == get_paths().reports_dir / "inputs_estimates.csv"
