from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Optional

import typer

from .circuit_inputs import CircuitType
from .config import CircuitConfig
from .dkim import generate_inputs_from_dkim, load_dkim_result
from .errors import CircuitInputError
from .sha_padding import sha256_pad


app = typer.Typer(help="zk-email circuit input generator.")


@app.callback()
def configure(
    verbose: bool = typer.Option(False, "--verbose", "-v", help="Log pipeline steps at DEBUG level."),
) -> None:
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )


@app.command("init-config")
def init_config(
    out: Path = typer.Option(
        Path("circuits/inputs/circuit_config.json"),
        "--out",
        "-o",
        help="Path where the circuit configuration JSON will be written.",
    ),
) -> None:
    """Write the default circuit profile."""
    CircuitConfig().dump(out)
    typer.echo(f"Wrote circuit config to {out}")


@app.command()
def generate(
    dkim_result: Path = typer.Option(
        ...,
        "--dkim-result",
        "-d",
        exists=True,
        dir_okay=False,
        help="JSON with the verified DKIM signature parts.",
    ),
    circuit: str = typer.Option(CircuitType.EMAIL.value, "--circuit", help="One of rsa, sha, email, test."),
    config: Optional[Path] = typer.Option(None, "--config", "-c", exists=True, dir_okay=False, help="Circuit config JSON."),
    out: Optional[Path] = typer.Option(None, "--out", "-o", help="Where to write the input JSON (stdout if omitted)."),
) -> None:
    """Build circuit inputs from a verified DKIM result."""
    try:
        cfg = CircuitConfig.load(config) if config else CircuitConfig()
    except ValueError as exc:
        typer.echo(f"error: {config}: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    try:
        result = load_dkim_result(dkim_result)
        inputs = generate_inputs_from_dkim(result, circuit, cfg)
    except CircuitInputError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    payload = json.dumps(inputs.to_dict())
    if out is None:
        typer.echo(payload)
        return
    out.parent.mkdir(parents=True, exist_ok=True)
    out.write_text(payload, encoding="utf-8")
    typer.echo(f"Wrote {inputs.circuit.value} inputs to {out}")


@app.command()
def pad(
    message: Path = typer.Argument(..., help="File whose bytes are padded."),
    max_len: int = typer.Option(1024, "--max-len", help="Padded buffer size in bytes."),
) -> None:
    """SHA-256 pad a file to a fixed buffer size."""
    try:
        padded = sha256_pad(message.read_bytes(), max_len)
    except CircuitInputError as exc:
        typer.echo(f"error: {exc}", err=True)
        raise typer.Exit(code=1) from exc
    typer.echo(f"in_len_padded_bytes={padded.length}")
    typer.echo(padded.data.hex())


def main() -> None:
    app()


if __name__ == "__main__":
    main()
