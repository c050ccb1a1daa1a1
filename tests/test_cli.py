from __future__ import annotations

import pytest

from yabber.cli import main as cli_main
from yabber.common.constants import ExitCodes
from yabber.core.regulation import encrypt_regulation


def run_cli(args, capsys):
    code = ExitCodes.OK
    try:
        cli_main(args)
    except SystemExit as exc:
        code = exc.code
    captured = capsys.readouterr()
    return code, captured.out, captured.err


def test_no_arguments_prints_help(capsys):
    code, out, _ = run_cli([], capsys)
    assert code == ExitCodes.OK
    assert "usage: yabber" in out


def test_unroot(capsys):
    code, out, _ = run_cli(["unroot", r"N:\data\a.param", r"N:\data\sub\b.param"], capsys)
    assert code == ExitCodes.OK
    assert out.splitlines() == ["a.param", r"sub\b.param"]


def test_unroot_traversal_exit_code(capsys):
    code, _, err = run_cli(["unroot", r"data\a.bin", r"data\x\..\..\..\evil.dll"], capsys)
    assert code == ExitCodes.PATH_TRAVERSAL
    assert "Refusing to extract" in err


def test_common_root(capsys):
    code, out, _ = run_cli(["common-root", "/a/b/c.bin", "/a/b/d.bin"], capsys)
    assert code == ExitCodes.OK
    assert out.strip() == "/a/b"


def test_filelist_join_and_split(capsys):
    _, out, _ = run_cli(["filelist", "join", "a,b", "c/d"], capsys)
    assert out.strip() == "a/,b,c//d"

    _, out, _ = run_cli(["filelist", "split", "a/,b,c//d"], capsys)
    assert out.splitlines() == ["a,b", "c/d"]

    code, out, _ = run_cli(["filelist", "split", "chr/c0000.anibnd,a/,b"], capsys)
    assert code == ExitCodes.OK
    assert out.splitlines() == ["chr/c0000.anibnd", "a,b"]


def test_decrypt_regulation_with_backup(tmp_path, capsys):
    source = tmp_path / "enc_regulation.bnd.dcx"
    source.write_bytes(encrypt_regulation(b"BND4plain", bytes(range(32))))
    output = tmp_path / "regulation.bnd"
    output.write_bytes(b"previous")

    code, _, _ = run_cli(["decrypt-regulation", str(source), "-o", str(output)], capsys)
    assert code == ExitCodes.OK
    assert output.read_bytes() == b"BND4plain"
    assert (tmp_path / "regulation.bnd.bak").read_bytes() == b"previous"


def test_decrypt_regulation_backup_disabled(tmp_path, capsys, monkeypatch):
    monkeypatch.setenv("YABBER_NO_BACKUP", "1")
    source = tmp_path / "enc_regulation.bnd.dcx"
    source.write_bytes(encrypt_regulation(b"BND4plain", bytes(32)))
    output = tmp_path / "regulation.bnd"
    output.write_bytes(b"previous")

    code, _, _ = run_cli(["decrypt-regulation", str(source), "-o", str(output)], capsys)
    assert code == ExitCodes.OK
    assert not (tmp_path / "regulation.bnd.bak").exists()


def test_decrypt_regulation_default_output(tmp_path, capsys):
    source = tmp_path / "enc_regulation.bnd.dcx"
    source.write_bytes(encrypt_regulation(b"BND4plain", bytes(32)))
    code, _, _ = run_cli(["decrypt-regulation", str(source)], capsys)
    assert code == ExitCodes.OK
    assert (tmp_path / "enc_regulation.bnd.dcx.bnd").read_bytes() == b"BND4plain"


def test_decrypt_regulation_short_file(tmp_path, capsys):
    source = tmp_path / "short.bin"
    source.write_bytes(b"BND4")
    code, _, err = run_cli(["decrypt-regulation", str(source)], capsys)
    assert code == ExitCodes.FORMAT_ERROR
    assert "is not a DS2 regulation file" in err


def test_decrypt_regulation_missing_file(tmp_path, capsys):
    code, _, _ = run_cli(["decrypt-regulation", str(tmp_path / "missing.bin")], capsys)
    assert code == ExitCodes.IO_ERROR


def test_encrypt_regulation_command(tmp_path, capsys):
    original = tmp_path / "enc_regulation.bnd.dcx"
    original.write_bytes(encrypt_regulation(b"old", bytes(range(32))))
    plain = tmp_path / "regulation.bnd"
    plain.write_bytes(b"BND4new")
    output = tmp_path / "out.dcx"

    code, _, _ = run_cli(
        ["encrypt-regulation", str(plain), "--header-from", str(original), "-o", str(output)], capsys
    )
    assert code == ExitCodes.OK
    assert output.read_bytes() == encrypt_regulation(b"BND4new", bytes(range(32)))


def test_detect_game(tmp_path, capsys):
    (tmp_path / "_yabber-bnd4.xml").write_text(
        "<bnd4><filename>regulation.bin</filename></bnd4>", encoding="utf-8"
    )
    code, out, _ = run_cli(["detect-game", str(tmp_path)], capsys)
    assert code == ExitCodes.OK
    assert out.strip() == "ER"


def test_detect_game_from_flag_and_env(tmp_path, capsys, monkeypatch):
    code, out, _ = run_cli(["detect-game", str(tmp_path), "--game", "ds3"], capsys)
    assert code == ExitCodes.OK
    assert out.strip() == "DS3"

    monkeypatch.setenv("YABBER_GAME", "sdt")
    code, out, _ = run_cli(["detect-game", str(tmp_path)], capsys)
    assert out.strip() == "SDT"


def test_detect_game_unresolved(tmp_path, capsys, monkeypatch):
    monkeypatch.setattr("builtins.input", lambda _prompt: "")
    code, _, err = run_cli(["detect-game", str(tmp_path)], capsys)
    assert code == ExitCodes.UNRESOLVED_PROFILE
    assert "Could not determine PARAM type." in err
