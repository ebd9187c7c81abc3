#!/usr/bin/env python3

from __future__ import annotations

import argparse
import json
from pathlib import Path

from zkemail_inputs.circuit_inputs import CircuitType
from zkemail_inputs.config import CircuitConfig
from zkemail_inputs.dkim import generate_inputs_from_dkim, load_dkim_result


def parse_args() -> argparse.Namespace:
    parser = argparse.ArgumentParser(description="Write circuit inputs for a verified DKIM result.")
    parser.add_argument("--dkim-result", type=Path, required=True, help="DKIM result JSON.")
    parser.add_argument(
        "--circuit",
        choices=[c.value for c in CircuitType],
        default=CircuitType.EMAIL.value,
        help="Circuit variant to build inputs for.",
    )
    parser.add_argument("--config", type=Path, help="Circuit config JSON.")
    parser.add_argument("--output-dir", type=Path, default=Path("circuits/inputs"), help="Directory to store inputs.")
    return parser.parse_args()


def main() -> None:
    args = parse_args()
    config = CircuitConfig.load(args.config) if args.config else CircuitConfig()
    result = load_dkim_result(args.dkim_result)
    inputs = generate_inputs_from_dkim(result, args.circuit, config)
    args.output_dir.mkdir(parents=True, exist_ok=True)
    out_path = args.output_dir / f"input_{args.circuit}.json"
    out_path.write_text(json.dumps(inputs.to_dict()), encoding="utf-8")
    print(f"Inputs: {out_path}")


if __name__ == "__main__":
    main()
