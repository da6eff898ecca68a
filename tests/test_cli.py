import json
import re

from passcraft.charsets import SYMBOLS
from passcraft.cli import main
from passcraft.config import config_path, load_config
from passcraft.randomsource import SystemRandomSource

PASSWORD_LINE = re.compile(r"Password #(\d+): (\S+)")


def test_generate_copies(appdata, capsys):
    assert main(["generate", "--length", "12", "--no-symbols", "--copies", "3"]) == 0
    found = PASSWORD_LINE.findall(capsys.readouterr().out)
    assert [n for n, _ in found] == ["1", "2", "3"]
    for _, pw in found:
        assert len(pw) == 12
        assert not any(c in SYMBOLS for c in pw)


def test_generate_uses_config_defaults(appdata, capsys):
    assert main(["config", "set", "length", "20"]) == 0
    assert main(["config", "set", "classes", "digit"]) == 0
    capsys.readouterr()
    assert main(["generate"]) == 0
    (_, pw), = PASSWORD_LINE.findall(capsys.readouterr().out)
    assert len(pw) == 20
    assert pw.isdigit()


def test_generate_length_out_of_bounds(appdata, capsys):
    assert main(["generate", "--length", "3"]) == 2
    assert "between 4 and 32" in capsys.readouterr().out


def test_generate_without_classes(appdata, capsys):
    code = main(["generate", "--no-upper", "--no-lower", "--no-digits", "--no-symbols"])
    assert code == 1
    assert "Select at least one character option." in capsys.readouterr().out


def test_generate_shows_strength(appdata, capsys):
    assert main(["generate", "--length", "32", "--show-strength"]) == 0
    assert "Strong" in capsys.readouterr().out


def test_insecure_fallback_warns(appdata, capsys, monkeypatch):
    monkeypatch.setattr(SystemRandomSource, "available", classmethod(lambda cls: False))
    assert main(["generate", "--length", "8"]) == 0
    out = capsys.readouterr().out
    assert "NOT cryptographically secure" in out
    assert PASSWORD_LINE.search(out)


def test_require_secure_refuses_fallback(appdata, capsys, monkeypatch):
    monkeypatch.setattr(SystemRandomSource, "available", classmethod(lambda cls: False))
    assert main(["generate", "--require-secure"]) == 2
    out = capsys.readouterr().out
    assert not PASSWORD_LINE.search(out)


def test_strength_command(appdata, capsys):
    assert main(["strength", "abcd"]) == 0
    assert "Weak" in capsys.readouterr().out


def test_info(appdata, capsys):
    assert main(["info"]) == 0
    out = capsys.readouterr().out
    assert "available" in out
    assert "symbol" in out


def test_config_set_rejects_bad_values(appdata, capsys):
    assert main(["config", "set", "colour", "blue"]) == 2
    assert main(["config", "set", "min_length", "40"]) == 2
    assert main(["config", "set", "classes", "emoji"]) == 2
    assert load_config()["min_length"] == 4


def test_config_reset(appdata, capsys):
    main(["config", "set", "copies", "5"])
    assert load_config()["copies"] == 5
    assert main(["config", "reset"]) == 0
    assert load_config()["copies"] == 1


def write_config(data):
    with open(config_path(), "w", encoding="utf-8") as f:
        json.dump(data, f)


def test_string_false_in_config_refuses_fallback(appdata, capsys, monkeypatch):
    write_config({"allow_insecure_fallback": "false"})
    monkeypatch.setattr(SystemRandomSource, "available", classmethod(lambda cls: False))
    assert main(["generate", "--length", "8"]) == 2
    assert not PASSWORD_LINE.search(capsys.readouterr().out)


def test_string_length_in_config(appdata, capsys):
    write_config({"length": "20"})
    assert main(["generate", "--no-symbols"]) == 0
    (_, pw), = PASSWORD_LINE.findall(capsys.readouterr().out)
    assert len(pw) == 20


def test_config_set_rejects_length_above_maximum(appdata, capsys):
    assert main(["config", "set", "length", "100"]) == 2
    assert main(["config", "set", "copies", "0"]) == 2
    cfg = load_config()
    assert cfg["length"] == 16
    assert cfg["copies"] == 1


def test_generate_rejects_non_positive_copies(appdata, capsys):
    for copies in ("0", "-3"):
        assert main(["generate", "--copies", copies]) == 2
        out = capsys.readouterr().out
        assert "Copies must be at least 1." in out
        assert not PASSWORD_LINE.search(out)
