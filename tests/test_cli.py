import json
from pathlib import Path

from typer.testing import CliRunner

from zkemail_inputs.cli import app
from zkemail_inputs.config import CircuitConfig

runner = CliRunner()


def _write_result(tmp_path: Path, dkim_result, **overrides) -> Path:
    raw = dkim_result.to_dict()
    raw.update(overrides)
    path = tmp_path / "dkim.json"
    path.write_text(json.dumps(raw), encoding="utf-8")
    return path


def test_init_config(tmp_path: Path):
    out = tmp_path / "cfg" / "circuit.json"
    result = runner.invoke(app, ["init-config", "--out", str(out)])
    assert result.exit_code == 0
    assert CircuitConfig.load(out) == CircuitConfig()


def test_generate_to_stdout(tmp_path: Path, dkim_result):
    path = _write_result(tmp_path, dkim_result)
    result = runner.invoke(app, ["generate", "--dkim-result", str(path), "--circuit", "rsa"])
    assert result.exit_code == 0
    payload = json.loads(result.stdout)
    assert set(payload) == {"modulus", "signature", "base_message"}


def test_generate_to_file_with_config(tmp_path: Path, dkim_result):
    path = _write_result(tmp_path, dkim_result)
    cfg_path = tmp_path / "circuit.json"
    CircuitConfig(max_header_padded_bytes=512).dump(cfg_path)
    out = tmp_path / "inputs" / "input_email.json"
    result = runner.invoke(
        app,
        ["generate", "--dkim-result", str(path), "--config", str(cfg_path), "--out", str(out)],
    )
    assert result.exit_code == 0
    payload = json.loads(out.read_text(encoding="utf-8"))
    assert len(payload["in_padded"]) == 512
    assert "body_hash_idx" in payload


def test_generate_reports_missing_body_hash(tmp_path: Path, dkim_result):
    path = _write_result(tmp_path, dkim_result, body_hash="absent")
    result = runner.invoke(app, ["generate", "--dkim-result", str(path)])
    assert result.exit_code == 1


def test_generate_rejects_unknown_circuit(tmp_path: Path, dkim_result):
    path = _write_result(tmp_path, dkim_result)
    result = runner.invoke(app, ["generate", "--dkim-result", str(path), "--circuit", "groth"])
    assert result.exit_code == 1


def test_pad_command(tmp_path: Path):
    message = tmp_path / "msg.bin"
    message.write_bytes(b"abc")
    result = runner.invoke(app, ["--verbose", "pad", str(message), "--max-len", "128"])
    assert result.exit_code == 0
    assert "in_len_padded_bytes=64" in result.stdout
    assert (b"abc\x80".hex() + "00" * 56 + (24).to_bytes(4, "big").hex() + "00" * 64) in result.stdout


def test_pad_command_oversized(tmp_path: Path):
    message = tmp_path / "msg.bin"
    message.write_bytes(b"z" * 100)
    result = runner.invoke(app, ["pad", str(message), "--max-len", "64"])
    assert result.exit_code == 1


def test_generate_reports_non_rsa_key(tmp_path: Path, dkim_result, ec_public_key_pem):
    path = _write_result(tmp_path, dkim_result, public_key_pem=ec_public_key_pem)
    result = runner.invoke(app, ["generate", "--dkim-result", str(path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_generate_reports_malformed_result(tmp_path: Path, dkim_result):
    path = _write_result(tmp_path, dkim_result, signature="%%%")
    result = runner.invoke(app, ["generate", "--dkim-result", str(path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)

    raw = dkim_result.to_dict()
    del raw["body"]
    path.write_text(json.dumps(raw), encoding="utf-8")
    result = runner.invoke(app, ["generate", "--dkim-result", str(path)])
    assert result.exit_code == 1
    assert isinstance(result.exception, SystemExit)


def test_generate_reports_invalid_config(tmp_path: Path, dkim_result):
    path = _write_result(tmp_path, dkim_result)
    cfg_path = tmp_path / "circuit.json"
    for content in ('{"max_header_padded_bytes": 100}', '{"max_header_bytes": 1024}', "{broken"):
        cfg_path.write_text(content, encoding="utf-8")
        result = runner.invoke(app, ["generate", "--dkim-result", str(path), "--config", str(cfg_path)])
        assert result.exit_code == 1
        assert isinstance(result.exception, SystemExit)
