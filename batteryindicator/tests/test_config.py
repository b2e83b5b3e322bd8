from typer.testing import CliRunner

from batteryindicator.cli import app
from batteryindicator.config import Config, load_config, save_config


def test_defaults_when_no_file(tmp_path):
    cfg = load_config(tmp_path / "missing.yaml")
    assert cfg.polling_interval_ms == 30000
    assert cfg.style.bar_length == 10


def test_interval_clamped():
    assert Config(polling_interval_ms=0).polling_interval_ms == 1
    assert Config(polling_interval_ms=-5).polling_interval_ms == 1


def test_only_interval_is_persisted(tmp_path):
    path = tmp_path / "config.yaml"
    save_config(Config(polling_interval_ms=12000, debug=True), path)
    assert path.read_text().strip() == "polling_interval_ms: 12000"
    assert load_config(path).polling_interval_ms == 12000


def test_cli_interval_set_and_show(tmp_path):
    path = tmp_path / "config.yaml"
    runner = CliRunner()
    result = runner.invoke(app, ["interval", "set", "5000", "--config", str(path)])
    assert result.exit_code == 0, result.output
    assert load_config(path).polling_interval_ms == 5000

    result = runner.invoke(app, ["interval", "show", "--config", str(path)])
    assert result.exit_code == 0, result.output
    assert "5000" in result.output
