#!/usr/bin/env python3
"""
Apply every KeyAct activation to a small input and export the kernels as a
JSON list of config nodes.

The printed table and the JSON file are handy as a reference when diffing
behavior between backends or releases.
"""

import os
import sys

# Ensure repo_root/src is importable when running this file directly:
# repo_root/
#   src/keyact/...
#   scripts/_demo_activations.py
THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")

if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

import argparse
import json
import logging
from pathlib import Path

import numpy as np

from keyact import (
    Celu,
    Relu,
    Sigmoid,
    Softmax,
    Swish,
    Tanh,
    activation_to_config,
    create_backend,
)


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument("--backend", default="numpy")
    ap.add_argument("--dtype", choices=["float32", "float64"], default="float32")
    ap.add_argument("--out", default="activations.json")
    ap.add_argument("--verbose", action="store_true")
    args = ap.parse_args()

    logging.basicConfig(level=logging.DEBUG if args.verbose else logging.WARNING)
    backend = create_backend(args.backend, dtype=args.dtype)

    # kernel -> demo input
    cases = [
        (Sigmoid(), [0.0, 1.0, 50.0, 100.0]),
        (Sigmoid(), [-100.0, -50.0, -1.0, 0.0]),
        (Tanh(), [-5.0, -0.5, 1.0, 1.2, 2.0, 3.0]),
        (Relu(), [0.0, 1.0, 50.0, 100.0]),
        (Swish(beta=1.0), [1.0, 2.0, 3.0, 4.0]),
        (Celu(alpha=1.0), [-1.0, 0.0, 1.0, 2.0, 3.0]),
        (Softmax(axis=0), [1.0, 2.0, 3.0, 4.0, 1.0, 2.0, 3.0]),
    ]

    # ----------------------------
    # Forward pass
    # ----------------------------
    np.set_printoptions(precision=8, linewidth=120)
    print(f"backend={backend!r}")
    for kernel, values in cases:
        x = np.asarray(values, dtype=args.dtype)
        y = kernel.apply(backend, x).to_numpy()
        print(f"{type(kernel).__name__:8s} {x} -> {y}")

    # ----------------------------
    # Export configs
    # ----------------------------
    out_path = Path(args.out)
    kernels = list(dict.fromkeys(k for k, _ in cases))
    nodes = [activation_to_config(k) for k in kernels]
    out_path.write_text(json.dumps(nodes, indent=2), encoding="utf-8")
    print(f"\nSaved activation configs to: {out_path.resolve()}")


if __name__ == "__main__":
    main()
