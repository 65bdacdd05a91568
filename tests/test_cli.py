import json
import struct
import subprocess
import sys
from pathlib import Path


SCRIPT = Path(__file__).resolve().parents[1] / "aiw_disasm.py"


def _write_script(base: Path, code: bytes, pool: bytes = b"") -> Path:
    header = b"ADV_98 \0" + struct.pack("<iiii", 0, 0, 0x18, 0x18 + len(code))
    script_path = base / "sample.bin"
    script_path.write_bytes(header + code + pool)
    return script_path


def _run(*args: str) -> subprocess.CompletedProcess:
    return subprocess.run(
        [sys.executable, str(SCRIPT), *args],
        capture_output=True,
        text=True,
    )


def test_cli_generates_listing(tmp_path: Path) -> None:
    pool = "名前".encode("cp932") + b"\0"
    script_path = _write_script(tmp_path, b"\x0E\x00\x07", pool)

    result = _run(str(script_path), "--encoding", "cp932")

    assert result.returncode == 0, result.stderr
    output_path = tmp_path / "sample.bin.txt"
    assert f"listing written to {output_path}" in result.stdout
    assert output_path.read_text("utf-8").splitlines() == [
        '00000018 | push dword 0x00000000 ; offset "名前"',
        "0000001A | ret",
        "0000001B | ; Strings",
        '0000001B | string "名前"',
    ]


def test_cli_output_override_and_annotations(tmp_path: Path) -> None:
    script_path = _write_script(tmp_path, b"\x13")
    annotations = tmp_path / "annotations.json"
    annotations.write_text(json.dumps({"0x13": {"name": "push_var"}}), "utf-8")
    output_path = tmp_path / "custom.txt"

    result = _run(str(script_path), "-o", str(output_path), "--annotations", str(annotations))

    assert result.returncode == 0, result.stderr
    assert output_path.read_text("utf-8").startswith("00000018 | push_var\n")


def test_cli_reports_unknown_opcode(tmp_path: Path) -> None:
    script_path = _write_script(tmp_path, b"\x00" * 8 + b"\xFF")

    result = _run(str(script_path))

    assert result.returncode == 1
    assert "unknown opcode 0xFF at 0x00000020" in result.stderr
    assert not (tmp_path / "sample.bin.txt").exists()


def test_cli_rejects_bad_signature(tmp_path: Path) -> None:
    script_path = tmp_path / "garbage.bin"
    script_path.write_bytes(b"NOT_A_SCRIPT" + bytes(16))

    result = _run(str(script_path))

    assert result.returncode == 1
    assert "not a recognized script container" in result.stderr


def test_cli_unknown_encoding(tmp_path: Path) -> None:
    script_path = _write_script(tmp_path, b"\x00")

    result = _run(str(script_path), "--encoding", "no-such-codec")

    assert result.returncode == 2


def test_cli_missing_input(tmp_path: Path) -> None:
    result = _run(str(tmp_path / "absent.bin"))

    assert result.returncode != 0
    assert "missing input file" in result.stderr


def test_cli_lists_opcodes() -> None:
    result = _run("--list-opcodes")

    assert result.returncode == 0
    lines = result.stdout.splitlines()
    assert len(lines) == 1 + 0xB3
    assert lines[1].startswith("0x00    nop")
    assert any(line.startswith("0xB2    opcode_B2") for line in lines)


def test_cli_strict_decoding_reports_pool_address(tmp_path: Path) -> None:
    script_path = _write_script(tmp_path, b"\x00", b"\xff\0")

    result = _run(str(script_path), "-e", "ascii", "--errors", "strict")

    assert result.returncode == 1
    assert "cannot decode string pool entry" in result.stderr
    assert "0x00000019" in result.stderr
    assert "Traceback" not in result.stderr
    assert not (tmp_path / "sample.bin.txt").exists()


def test_cli_rejects_malformed_annotations(tmp_path: Path) -> None:
    script_path = _write_script(tmp_path, b"\x00")
    annotations = tmp_path / "annotations.json"
    annotations.write_text("{not json", "utf-8")

    result = _run(str(script_path), "--annotations", str(annotations))

    assert result.returncode == 2
    assert "invalid annotation file" in result.stderr
    assert "Traceback" not in result.stderr
