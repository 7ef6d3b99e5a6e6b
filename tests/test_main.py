"""Tests for the command line front end and key sheets."""

import json

import pytest

import enigma
import keyboard_and_plugboard
import rotor_and_reflector
from debug import Debug
from main import Config, MachineSettings, enable_debug, group, load_config, main

BDZGO_ARGS = ["--rotors", "I II III", "--reflector", "B", "--plugboard", "",
              "--rings", "AAA", "--positions", "AAA"]


class TestMachineSettings:
    def test_defaults_match_basic_example(self):
        s = MachineSettings()

        assert s.rotors == ["VIII", "II", "III"]
        assert s.reflector == "B"
        assert s.plugboard == "CT BX ZW PI VM NO"
        assert s.positions == "CUX"

    def test_from_dict_accepts_strings_and_lists(self):
        s = MachineSettings.from_dict({
            "rotors": "II I III",
            "reflector": "A",
            "plugboard": ["AM", "FI", "NV", "PS", "TU", "WZ"],
            "ring_settings": "XMV",
            "positions": "ABL",
        })

        assert s.rotors == ["II", "I", "III"]
        assert s.plugboard == "AM FI NV PS TU WZ"
        assert s.build().encode_string("GCDSEAHUGW") == "FEINDLIQEI"

    def test_plugboard_is_optional(self):
        s = MachineSettings.from_dict({
            "rotors": ["I", "II", "III"],
            "reflector": "B",
            "ring_settings": "AAA",
            "positions": "AAA",
        })

        assert s.plugboard == ""

    def test_missing_keys(self):
        with pytest.raises(ValueError, match="Missing keys in config: positions, reflector"):
            MachineSettings.from_dict({"rotors": ["I"], "ring_settings": "A"})

    def test_json_round_trip(self, tmp_path):
        path = tmp_path / "key.json"
        original = MachineSettings(rotors=["IV", "V", "VI"], positions="QRS")
        path.write_text(json.dumps(original.to_dict()), encoding="utf-8")

        assert load_config(path) == original


class TestCli:
    def test_one_shot(self, capsys):
        main(BDZGO_ARGS + ["aaaaa"])

        assert capsys.readouterr().out.strip() == "BDZGO"

    def test_words_are_joined_and_grouped(self, capsys):
        main(BDZGO_ARGS + ["--block", "2", "aa", "aaa"])

        assert capsys.readouterr().out.strip() == "BD ZG O"

    def test_default_key_is_reciprocal(self, capsys):
        main(["--block", "0", "my", "message"])
        cipher = capsys.readouterr().out.strip()

        main(["--block", "0", cipher])
        assert capsys.readouterr().out.strip() == "MYMESSAGE"

    def test_config_file(self, tmp_path, capsys):
        path = tmp_path / "key.json"
        path.write_text(json.dumps({
            "rotors": ["I", "II", "III"],
            "reflector": "B",
            "plugboard": "",
            "ring_settings": "AAA",
            "positions": "AAA",
        }), encoding="utf-8")

        main(["--config", str(path), "AAAAA"])

        assert capsys.readouterr().out.strip() == "BDZGO"

    def test_interactive_rewinds_each_line(self, monkeypatch, capsys):
        lines = iter(["aaaaa", "aaaaa", ""])
        monkeypatch.setattr("builtins.input", lambda _prompt="": next(lines))

        main(BDZGO_ARGS)

        out = capsys.readouterr().out.splitlines()
        assert out[1:] == ["BDZGO", "BDZGO"]

    def test_bad_key_exits(self):
        with pytest.raises(SystemExit) as exc:
            main(BDZGO_ARGS + ["--positions", "AA", "HELLO"])

        assert "lengths must match" in str(exc.value.code)

    def test_bad_message_exits(self):
        with pytest.raises(SystemExit) as exc:
            main(BDZGO_ARGS + ["HELLO,", "WORLD"])

        assert "Invalid character" in str(exc.value.code)

    def test_missing_config_file_exits(self, tmp_path):
        with pytest.raises(SystemExit):
            main(["--config", str(tmp_path / "nope.json"), "HELLO"])


def test_group():
    assert group("ABCDEFG", 5) == "ABCDE FG"
    assert group("ABCDEFG", 0) == "ABCDEFG"
    assert group("", 5) == ""


def test_config_defaults():
    cfg = Config()

    assert cfg.block == 5
    assert cfg.debug == []
    assert cfg.log_to is None


def test_enable_debug_reaches_machine_modules(monkeypatch):
    monkeypatch.setattr(Debug, "_root_configured", True)
    try:
        enable_debug(["stepping"])
        assert rotor_and_reflector.debug.status()["stepping"] is True
    finally:
        for module in (keyboard_and_plugboard, rotor_and_reflector, enigma):
            module.debug.disable("stepping")


class TestBadKeySheets:
    @pytest.mark.parametrize("payload, message", [
        ([1, 2], "must be a JSON object"),
        ({"rotors": ["I", "II", "III"], "reflector": "B",
          "ring_settings": [1, 1, 1], "positions": "AAA"}, "'ring_settings' must be a string"),
        ({"rotors": [1, 2, 3], "reflector": "B",
          "ring_settings": "AAA", "positions": "AAA"}, "'rotors' must be a string or a list"),
        ({"rotors": "I II III", "reflector": "B", "plugboard": 5,
          "ring_settings": "AAA", "positions": "AAA"}, "'plugboard' must be a string or a list"),
    ])
    def test_cli_exits_with_message(self, tmp_path, payload, message):
        path = tmp_path / "key.json"
        path.write_text(json.dumps(payload), encoding="utf-8")

        with pytest.raises(SystemExit) as exc:
            main(["--config", str(path), "HELLO"])

        assert str(exc.value.code).startswith("enigma: ")
        assert message in str(exc.value.code)


def test_interactive_stops_on_eof(monkeypatch, capsys):
    lines = iter(["aaaaa"])

    def fake_input(_prompt=""):
        try:
            return next(lines)
        except StopIteration:
            raise EOFError from None

    monkeypatch.setattr("builtins.input", fake_input)

    main(BDZGO_ARGS)

    assert capsys.readouterr().out.splitlines()[1:] == ["BDZGO"]
