"""Smoke tests for the ``mayacal`` CLI."""

from __future__ import annotations

import json

import pytest

from mayacal import cli
from mayacal.config import Settings, load_settings, save_settings


def test_convert_prints_summary(capsys) -> None:
    exit_code = cli.main(["convert", "2012-12-21"])
    assert exit_code == 0
    output = capsys.readouterr().out
    assert "Long Count  : 13.0.0.0.0" in output
    assert "4 Ajaw" in output
    assert "3 Kʼankʼin" in output


def test_convert_json_output(capsys) -> None:
    exit_code = cli.main(["convert", "3114-08-11 BCE", "--json"])
    assert exit_code == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["offset"] == 0
    assert payload["tzolkin"]["label"] == "4 Ajaw"
    assert payload["haab"]["label"] == "8 Kumkʼu"


def test_convert_table_flag(capsys) -> None:
    assert cli.main(["convert", "2024-01-01", "--table"]) == 0
    output = capsys.readouterr().out
    assert "Unit" in output and "Value" in output
    assert "Tun    |     360 |    11" in output


@pytest.mark.parametrize("value", ["not-a-date", "3114-08-10 BCE"])
def test_convert_failure_exit_status(capsys, value: str) -> None:
    exit_code = cli.main(["convert", value])
    assert exit_code == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "3114 BCE" in captured.err


def test_convert_strict_flag(capsys) -> None:
    assert cli.main(["convert", "2023-13-01"]) == 0
    capsys.readouterr()
    assert cli.main(["convert", "2023-13-01", "--strict"]) == 1


def test_convert_long_count_lookup(capsys) -> None:
    assert cli.main(["convert", "--long-count", "13.0.0.0.0", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["date"] == "2012-12-21"


def test_convert_rejects_non_ascii_long_count_digits(capsys) -> None:
    assert cli.main(["convert", "--long-count", "².0.0.0.0"]) == 1
    captured = capsys.readouterr()
    assert captured.out == ""
    assert "3114 BCE" in captured.err


def test_convert_offset_lookup(capsys) -> None:
    assert cli.main(["convert", "--offset", "1"]) == 0
    output = capsys.readouterr().out
    assert "Tzolkʼin    : 5 Imix" in output
    assert "Haab        : 9 Kumkʼu" in output
    assert cli.main(["convert", "--offset", "-1"]) == 1


def test_convert_requires_a_source() -> None:
    with pytest.raises(SystemExit) as excinfo:
        cli.main(["convert"])
    assert excinfo.value.code == 2


def test_today_command(capsys) -> None:
    assert cli.main(["today", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["longCount"]["baktun"] >= 13


def test_units_command(capsys) -> None:
    assert cli.main(["units"]) == 0
    output = capsys.readouterr().out
    assert "JDN 584283" in output
    assert "Baktun" in output
    assert "Wayebʼ" in output


def test_units_json(capsys) -> None:
    assert cli.main(["units", "--json"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["tzolkinNames"][19] == "Ajaw"


def test_configured_json_output(capsys) -> None:
    settings = Settings()
    settings.render.output = "json"
    save_settings(settings)

    assert cli.main(["convert", "2012-12-21"]) == 0
    payload = json.loads(capsys.readouterr().out)
    assert payload["longCount"]["label"] == "13.0.0.0.0"


def test_config_commands(capsys, _isolated_config_home) -> None:
    assert cli.main(["config", "path"]) == 0
    assert str(_isolated_config_home) in capsys.readouterr().out

    settings = Settings()
    settings.conversion.validation = "strict"
    save_settings(settings)
    assert cli.main(["config", "show"]) == 0
    assert "validation: strict" in capsys.readouterr().out

    assert cli.main(["config", "reset"]) == 0
    assert load_settings().conversion.validation == "passthrough"
