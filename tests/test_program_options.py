import pytest

from lootdogs.program_options import parse_command_line


def test_minimal_options_use_defaults():
    args = parse_command_line(["server", "-c", "config.json", "-w", "static"])
    assert args.config_file == "config.json"
    assert args.www_root == "static"
    assert args.tick_period == 0
    assert args.randomize_spawn_points is False
    assert args.state_file == ""
    assert args.save_state_period == 0


def test_all_options():
    args = parse_command_line(
        [
            "server",
            "--tick-period=50",
            "--config-file",
            "data/config.json",
            "--www-root",
            "static",
            "--randomize-spawn-points",
            "--state-file",
            "state.bin",
            "--save-state-period",
            "1000",
        ]
    )
    assert args.tick_period == 50
    assert args.config_file == "data/config.json"
    assert args.randomize_spawn_points is True
    assert args.state_file == "state.bin"
    assert args.save_state_period == 1000


def test_base_path_is_program_directory(tmp_path):
    program = tmp_path / "bin" / "server"
    args = parse_command_line([str(program), "-c", "c.json", "-w", "www"])
    assert args.base_path == tmp_path / "bin"


def test_help_prints_and_returns_none(capsys):
    assert parse_command_line(["server", "--help"]) is None
    assert "--config-file" in capsys.readouterr().out


def test_missing_config_file_raises():
    with pytest.raises(ValueError, match="Config files have not been specified"):
        parse_command_line(["server", "-w", "static"])


def test_missing_www_root_raises():
    with pytest.raises(ValueError, match="static files root is not specified"):
        parse_command_line(["server", "-c", "config.json"])


def test_invalid_tick_period_raises():
    with pytest.raises(ValueError):
        parse_command_line(["server", "-c", "c.json", "-w", "www", "-t", "fast"])


def test_unknown_option_raises():
    with pytest.raises(ValueError):
        parse_command_line(["server", "-c", "c.json", "-w", "www", "--bogus"])