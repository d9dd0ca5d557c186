import pytest

pytest.importorskip("tkinter")

import gui


def test_defaults_build_wrapping_config():
    parser = gui.build_parser()
    args = parser.parse_args([])
    config = gui.config_from_args(parser, args)

    assert config.grid_size == 10
    assert config.speed_ms == 500
    assert config.wrap_walls is True
    assert config.seed is None


def test_flags_map_onto_config():
    parser = gui.build_parser()
    args = parser.parse_args(["--grid-size", "20", "--speed-ms", "120", "--walls", "--seed", "3"])
    config = gui.config_from_args(parser, args)

    assert config.grid_size == 20
    assert config.speed_ms == 120
    assert config.wrap_walls is False
    assert config.seed == 3


def test_invalid_config_is_a_parser_error(capsys):
    parser = gui.build_parser()
    args = parser.parse_args(["--grid-size", "1"])
    with pytest.raises(SystemExit):
        gui.config_from_args(parser, args)
    assert "Grid size" in capsys.readouterr().err


def test_main_wires_store_and_config(monkeypatch, tmp_path):
    launched = {}

    def fake_run(config, store):
        launched["config"] = config
        launched["store"] = store

    monkeypatch.setattr(gui, "run_player_gui", fake_run)
    record_file = tmp_path / "best.json"
    gui.main(["--record-file", str(record_file), "--grid-size", "12"])

    assert launched["config"].grid_size == 12
    assert isinstance(launched["store"], gui.JsonRecordStore)
    assert launched["store"].path == str(record_file)


def test_no_persist_uses_memory_store(monkeypatch):
    launched = {}
    monkeypatch.setattr(gui, "run_player_gui", lambda config, store: launched.update(store=store))
    gui.main(["--no-persist"])
    assert isinstance(launched["store"], gui.MemoryRecordStore)
