from __future__ import annotations

import io
from pathlib import Path

import pytest

import gkey.cli.main as main_mod
import gkey.cli.commands as commands_mod


@pytest.fixture(autouse=True)
def _no_logging_setup(monkeypatch):
    monkeypatch.setattr(main_mod, "configure_logging", lambda *a, **k: None)


def test_encode_keyboard(capsys):
    assert main_mod.main(["encode", "3", "1"]) == 0
    assert capsys.readouterr().out.strip() == "keybd-g3-m1"


def test_encode_mouse_default_modal(capsys):
    assert main_mod.main(["encode", "--mouse", "6"]) == 0
    assert capsys.readouterr().out.strip() == "mouse-g6-m0"


def test_encode_too_large(capsys):
    assert main_mod.main(["encode", str(2**31), "0"]) == 2
    assert "ERROR" in capsys.readouterr().out


def test_encode_negative_rejected_by_argparse():
    with pytest.raises(SystemExit):
        main_mod.main(["encode", "-1"])


def test_decode_prints_fields(capsys):
    assert main_mod.main(["decode", "mouse-g4-m0"]) == 0
    out = capsys.readouterr().out
    assert "Logitech Mouse" in out
    assert "Button 4" in out
    assert "Canonical:  mouse-g4-m0" in out


def test_decode_garbage_does_not_fail(capsys):
    assert main_mod.main(["decode", "garbage"]) == 0
    assert "Canonical:  keybd-g0-m0" in capsys.readouterr().out


def test_info(capsys):
    assert main_mod.main(["info"]) == 0
    out = capsys.readouterr().out
    assert "G-Key Plugin 1.1 (API 26)" in out
    assert "Key prefix: gkey" in out


def test_run_single_line(capsys):
    assert main_mod.main(["run", "join", "1", "secret"]) == 0
    out = capsys.readouterr().out
    assert "> move client=1 channel=1 conn=1" in out
    assert "handled: join 1 secret" in out


def test_run_reads_stdin_and_reports_unhandled(capsys, monkeypatch):
    monkeypatch.setattr("sys.stdin", io.StringIO("server\n\nfrobnicate\n"))
    assert main_mod.main(["run"]) == 1
    out = capsys.readouterr().out
    assert "Server Connect Info: localhost:9987 (pw: )" in out
    assert "handled: server" in out
    assert "unhandled: frobnicate" in out


def test_bad_config_reports_error(capsys, tmp_path: Path):
    cfg = tmp_path / "bad.yml"
    cfg.write_text("plugin:\n  nope: 1\n", encoding="utf-8")
    assert main_mod.main(["--config", str(cfg), "info"]) == 1
    out = capsys.readouterr().out
    assert out.startswith("ERROR: Unknown plugin config keys: nope.")
    assert "Hint:" in out


def test_build_plugin_wires_console_host():
    out = io.StringIO()
    plugin = commands_mod.build_plugin(commands_mod.GkeyConfig(), out=out)
    plugin.register_plugin_id("x")
    assert plugin.process_command(2, "subscribeall") is True
    assert "> subscribe all conn=2" in out.getvalue()
