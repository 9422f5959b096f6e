"""
Tests for the command-line interface.
"""

from pathlib import Path

from typer.testing import CliRunner

from payperiod.cli.app import app

runner = CliRunner()

EXAMPLES_DIR = Path(__file__).parent.parent / "examples"
EXAMPLE_CONFIG = Path(__file__).parent.parent / "config.example.yaml"


def test_replay_example_scenario():
    """The bundled scenario yields three periods totalling 5.5 days."""
    result = runner.invoke(
        app,
        ["replay", str(EXAMPLES_DIR / "june_leave.yaml"), "--config", str(EXAMPLE_CONFIG)],
    )

    assert result.exit_code == 0, result.output
    assert "5.5 jours répartis sur 3 périodes" in result.output
    assert "Marie Dubois" in result.output
    assert "02/06/2025 - 04/06/2025 | 3 jours" in result.output
    assert "10/06/2025 | demi-journée (matin)" in result.output


def test_replay_without_config_file(tmp_path):
    """--locked-month is enough when no config file exists."""
    scenario = tmp_path / "scenario.yaml"
    scenario.write_text("events:\n  - [click, 2025-06-02]\n", encoding="utf-8")

    result = runner.invoke(
        app,
        [
            "replay", str(scenario),
            "--config", str(tmp_path / "missing.yaml"),
            "--locked-month", "2025-06",
        ],
    )

    assert result.exit_code == 0, result.output
    assert "1 jour" in result.output


def test_replay_uses_scenario_locked_month_without_config(tmp_path):
    """A scenario declaring its locked month needs neither a config file nor --locked-month."""
    scenario = tmp_path / "scenario.yaml"
    scenario.write_text(
        "locked_month: \"2025-06\"\nevents:\n  - [down, 2025-06-06]\n  - [enter, 2025-06-07]\n  - [up, 2025-06-07]\n",
        encoding="utf-8",
    )

    result = runner.invoke(app, ["replay", str(scenario), "--config", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 0, result.output
    assert "juin 2025" in result.output
    assert "06/06/2025 - 06/06/2025 | 1 jour" in result.output


def test_replay_without_config_or_locked_month(tmp_path):
    """Without config, option or scenario month there is no month to lock."""
    scenario = tmp_path / "scenario.yaml"
    scenario.write_text("events:\n  - [click, 2025-06-02]\n", encoding="utf-8")

    result = runner.invoke(app, ["replay", str(scenario), "--config", str(tmp_path / "missing.yaml")])

    assert result.exit_code == 1
    assert "Erreur" in result.output


def test_replay_invalid_scenario(tmp_path):
    """Malformed scenarios exit with an error message."""
    scenario = tmp_path / "scenario.yaml"
    scenario.write_text("events:\n  - [hover, 2025-06-02]\n", encoding="utf-8")

    result = runner.invoke(app, ["replay", str(scenario), "--config", str(EXAMPLE_CONFIG)])

    assert result.exit_code == 1
    assert "Erreur" in result.output


def test_month_view():
    """The month view lists the locked month's days."""
    result = runner.invoke(app, ["month", "--config", str(EXAMPLE_CONFIG)])

    assert result.exit_code == 0, result.output
    assert "30" in result.output


def test_event_types():
    """All payroll event types are listed."""
    result = runner.invoke(app, ["event-types"])

    assert result.exit_code == 0
    assert "conges-payes" in result.output
    assert "prime" in result.output
