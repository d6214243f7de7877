import pytest
from typer.testing import CliRunner

import cli.doctor as doctor
import cli.main as cli_main

runner = CliRunner()


@pytest.fixture(autouse=True)
def isolated_config(monkeypatch, tmp_path):
    monkeypatch.chdir(tmp_path)
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path / "xdg"))


def _connectivity_check(ok, detail):
    async def fake_check(url, settings):
        return ok, detail

    return fake_check


def test_doctor_run_reports_config_and_connectivity(monkeypatch):
    monkeypatch.setattr(doctor, "_check_http", _connectivity_check(True, "HTTP 200"))

    result = runner.invoke(cli_main.app, ["--no-banner", "doctor", "run"])

    assert result.exit_code == 0, result.output
    assert "Tax rate: groceries" in result.output
    assert "HTTP 200" in result.output


def test_doctor_run_fails_when_catalog_unreachable(monkeypatch):
    monkeypatch.setattr(doctor, "_check_http", _connectivity_check(False, "ConnectError"))

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 1
    assert "FAIL" in result.output


def test_doctor_setup_writes_user_env(tmp_path):
    result = runner.invoke(
        cli_main.app,
        ["doctor", "setup"],
        input="https://mirror.test\n0.05\n0.01\n",
    )

    assert result.exit_code == 0, result.output
    env_text = (tmp_path / "xdg" / "catalog-pricer" / ".env").read_text(encoding="utf-8")
    assert "CATALOG_PRICER_CATALOG_BASE_URL=https://mirror.test" in env_text
    assert "CATALOG_PRICER_STANDARD_TAX_RATE=0.05" in env_text
    assert '"groceries": 0.01' in env_text


def test_doctor_setup_rejects_out_of_range_rate():
    result = runner.invoke(
        cli_main.app,
        ["doctor", "setup"],
        input="https://mirror.test\n1.5\n0.01\n",
    )

    assert result.exit_code != 0


def test_doctor_run_reports_bad_tax_rates_as_config_error(monkeypatch):
    monkeypatch.setattr(doctor, "_check_http", _connectivity_check(True, "HTTP 200"))
    monkeypatch.setenv("CATALOG_PRICER_CATEGORY_TAX_RATES", '{"groceries": 3}')

    result = runner.invoke(cli_main.app, ["doctor", "run"])

    assert result.exit_code == 1
    assert "[Config Error]: category_tax_rates.groceries:" in result.output
    assert "Traceback" not in result.output
