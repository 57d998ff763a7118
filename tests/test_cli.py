import json

import pandas as pd
import pytest
import yaml
from click.testing import CliRunner

from hkid import __version__
from hkid.cli import cli


def test_version():
    runner = CliRunner()
    result = runner.invoke(cli, ["--version"])
    assert result.exit_code == 0
    assert result.output.strip() == f"hkid, version {__version__}"


def test_validate_pretty():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", "a123456(3)", "WX1234569"])
    assert result.exit_code == 0
    assert "VALID" in result.output
    assert "A123456(3)" in result.output
    assert "WX123456(9)" in result.output


def test_validate_reports_failures():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", "A123456(3)", "A123456(7)", "#$123456"])
    assert result.exit_code == 1
    assert "INVALID_CHECK_DIGIT" in result.output
    assert "INVALID_FORMAT" in result.output


def test_validate_json():
    runner = CliRunner()
    result = runner.invoke(cli, ["validate", "A123456", "--output", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data[0]["status"] == "valid"
    assert data[0]["check_digit"] == "3"


def test_check():
    runner = CliRunner()
    assert runner.invoke(cli, ["check", "A123456", "3"]).exit_code == 0
    assert runner.invoke(cli, ["check", "A123456", "7"]).exit_code == 1
    assert runner.invoke(cli, ["check", "A123456(3)", "3"]).exit_code == 1


def test_format():
    runner = CliRunner()
    result = runner.invoke(cli, ["format", "A1234563", "--style", "complete"])
    assert result.exit_code == 0
    assert result.output.strip() == "A123456(3)"

    result = runner.invoke(cli, ["format", "A123456(3)", "--style", "without-check-digit"])
    assert result.output.strip() == "A123456"


def test_format_invalid_number():
    runner = CliRunner()
    result = runner.invoke(cli, ["format", "A123456(7)"])
    assert result.exit_code == 1
    assert "Invalid check digit" in result.output


def test_describe():
    runner = CliRunner()
    result = runner.invoke(cli, ["describe", "WX123456"])
    assert result.exit_code == 0
    assert "foreign domestic helper" in result.output

    result = runner.invoke(cli, ["describe", "A123456", "--chinese"])
    assert "首批身份證" in result.output


def test_describe_unknown_prefix():
    runner = CliRunner()
    result = runner.invoke(cli, ["describe", "AA123456"])
    assert result.exit_code == 1
    assert "not a defined HKID prefix" in result.output


def test_prefixes():
    runner = CliRunner()
    result = runner.invoke(cli, ["prefixes"])
    assert result.exit_code == 0
    assert len(result.output.strip().splitlines()) == 29


def test_generate_is_reproducible_with_seed():
    runner = CliRunner()
    first = runner.invoke(cli, ["generate", "-n", "5", "--seed", "11", "--any-prefix"])
    second = runner.invoke(cli, ["generate", "-n", "5", "--seed", "11", "--any-prefix"])
    assert first.exit_code == 0
    assert first.output == second.output
    lines = first.output.strip().splitlines()
    assert len(lines) == 5
    check = runner.invoke(cli, ["validate", *lines])
    assert check.exit_code == 0


def test_generate_uses_config_file(tmp_path):
    config_file = tmp_path / "hkid.yaml"
    config_file.write_text(yaml.dump({
        "version": 1,
        "hkid": {"output_format": "without_check_digit", "seed": 5},
    }))
    runner = CliRunner()
    first = runner.invoke(cli, ["--config", str(config_file), "generate", "-n", "3"])
    second = runner.invoke(cli, ["--config", str(config_file), "generate", "-n", "3"])
    assert first.exit_code == 0
    assert first.output == second.output
    assert all("(" not in line for line in first.output.splitlines())


def test_bad_config_file(tmp_path):
    config_file = tmp_path / "hkid.yaml"
    config_file.write_text("hkid: {}\n")
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(config_file), "prefixes"])
    assert result.exit_code == 1
    assert "Could not load config" in result.output


@pytest.mark.parametrize("settings", [
    {"only_defined_prefix": "false"},
    {"encoding": "no-such-codec"},
])
def test_config_file_with_bad_types_is_rejected(tmp_path, settings):
    config_file = tmp_path / "hkid.yaml"
    config_file.write_text(yaml.dump({"version": 1, "hkid": settings}))
    runner = CliRunner()
    result = runner.invoke(cli, ["--config", str(config_file), "generate"])
    assert result.exit_code == 1
    assert "Could not load config" in result.output


def test_scan_pretty(tmp_path):
    csv_file = tmp_path / "people.csv"
    pd.DataFrame({"hkid": ["A123456(3)", "A123456(7)"]}).to_csv(csv_file, index=False)
    runner = CliRunner()
    result = runner.invoke(cli, ["scan", str(csv_file)])
    assert result.exit_code == 1
    assert "HKID COLUMN SCAN REPORT" in result.output
    assert "REJECTED ROWS" in result.output


def test_scan_json(tmp_path):
    csv_file = tmp_path / "people.csv"
    pd.DataFrame({"id_no": ["A123456(3)", "wx1234569"]}).to_csv(csv_file, index=False)
    runner = CliRunner()
    result = runner.invoke(cli, ["scan", str(csv_file), "--column", "id_no", "--output", "json"])
    assert result.exit_code == 0
    data = json.loads(result.output)
    assert data["summary"]["valid"] == 2
    assert data["rows"][1]["normalized"] == "WX123456(9)"


def test_scan_unknown_column(tmp_path):
    csv_file = tmp_path / "people.csv"
    pd.DataFrame({"hkid": ["A123456(3)"]}).to_csv(csv_file, index=False)
    runner = CliRunner()
    result = runner.invoke(cli, ["scan", str(csv_file), "--column", "missing"])
    assert result.exit_code == 1
    assert "not found" in result.output
