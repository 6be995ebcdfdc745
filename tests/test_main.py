import json

import main
from src.core.config import ConfigManager


def test_demo_prints_log(capsys):
    assert main.main(["--quiet"]) == 0

    out = capsys.readouterr().out.splitlines()
    assert out == [
        "ON slot 0 executed",
        "OFF slot 0 executed",
        "UNDO executed",
        "ON slot 1 executed",
        "OFF slot 1 executed",
        "ON slot 2 executed",
        "UNDO executed",
    ]


def test_build_remote_final_state():
    remote, living_room, tv = main.build_remote(ConfigManager())
    main.run_demo(remote, verbose=False)

    # Undoing the all-off macro switches both devices on, whatever their prior state
    assert living_room.is_on
    assert tv.is_on
    assert remote.capacity == 4
    assert remote.last_action is None


def test_capacity_from_config(tmp_path):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"dispatcher": {"capacity": 3}}))

    remote, _, _ = main.build_remote(ConfigManager(str(path)))

    assert remote.capacity == 3


def test_invalid_config_exits(tmp_path, capsys):
    path = tmp_path / "settings.json"
    path.write_text(json.dumps({"dispatcher": {"capacity": 0}}))

    assert main.main(["--config", str(path), "--quiet"]) == 2
    assert "Invalid configuration" in capsys.readouterr().err
