import pytest
from pydantic import ValidationError

from core.config import AppSettings, write_user_env_vars


def test_defaults():
    settings = AppSettings(_env_file=None)

    assert settings.catalog_base_url == "https://dummyjson.com"
    assert settings.default_limit == 10
    table = settings.tax_table()
    assert table.rate_for("Groceries") == 0.03
    assert table.rate_for("laptops") == 0.0475


def test_tax_rates_from_environment(monkeypatch):
    monkeypatch.setenv("CATALOG_PRICER_STANDARD_TAX_RATE", "0.1")
    monkeypatch.setenv("CATALOG_PRICER_CATEGORY_TAX_RATES", '{"Books": 0.0}')

    table = AppSettings(_env_file=None).tax_table()

    assert table.default_rate == 0.1
    assert table.rate_for("books") == 0.0
    assert table.rate_for("groceries") == 0.1


def test_out_of_range_category_rate_is_rejected_on_load(monkeypatch):
    with pytest.raises(ValidationError) as excinfo:
        AppSettings(_env_file=None, category_tax_rates={"groceries": 3.0})

    assert excinfo.value.errors()[0]["loc"] == ("category_tax_rates", "groceries")

    monkeypatch.setenv("CATALOG_PRICER_CATEGORY_TAX_RATES", '{"books": -0.1}')
    with pytest.raises(ValidationError):
        AppSettings(_env_file=None)


def test_log_level_is_normalized_and_checked():
    assert AppSettings(_env_file=None, log_level="debug").log_level == "DEBUG"

    with pytest.raises(ValidationError):
        AppSettings(_env_file=None, log_level="loud")


def test_write_user_env_vars_merges_existing(tmp_path):
    env_path = tmp_path / "cfg" / ".env"
    env_path.parent.mkdir()
    env_path.write_text("# comment\nCATALOG_PRICER_DEFAULT_LIMIT=5\n", encoding="utf-8")

    write_user_env_vars({"CATALOG_PRICER_CATALOG_BASE_URL": "https://mirror.test"}, env_path=env_path)

    lines = env_path.read_text(encoding="utf-8").splitlines()
    assert "CATALOG_PRICER_DEFAULT_LIMIT=5" in lines
    assert "CATALOG_PRICER_CATALOG_BASE_URL=https://mirror.test" in lines


def test_settings_read_env_file(tmp_path):
    env_path = write_user_env_vars({"CATALOG_PRICER_HTTP_TIMEOUT_SECONDS": "3.5"}, env_path=tmp_path / ".env")

    assert AppSettings(_env_file=env_path).http_timeout_seconds == 3.5
