# scripts/bench_activations_numpy_vs_torch.py
"""
Microbench: activation kernels (NumPy backend vs PyTorch backend).

What it measures
----------------
- Per-kernel latency of ``kernel.apply(backend, x)`` on both backends.
- Uses warmup iterations (not recorded), then repeats with median/p95.

Notes
-----
- The timing includes the Python boundary overhead (constant creation, one
  operand per primitive, materialization back to a NumPy-backed Tensor),
  because that is often the dominating cost for small tensors.
- The input is allocated once and reused across iterations.

Example
-------
python -O scripts/bench_activations_numpy_vs_torch.py --kernels sigmoid softmax \
    --shape 256 1024 --dtype float32 --warmup 20 --repeats 100 --sanity
"""

from __future__ import annotations

import argparse
import math
import statistics
import time
from dataclasses import dataclass
from typing import Callable, Dict, List, Sequence

import numpy as np

import os
import sys

THIS_DIR = os.path.dirname(os.path.abspath(__file__))
ROOT_DIR = os.path.abspath(os.path.join(THIS_DIR, ".."))
SRC_DIR = os.path.join(ROOT_DIR, "src")
if SRC_DIR not in sys.path:
    sys.path.insert(0, SRC_DIR)

from keyact import (  # noqa: E402
    BackendNotAvailableError,
    Celu,
    IActivation,
    NumpyBackend,
    Relu,
    Sigmoid,
    Softmax,
    Swish,
    Tanh,
    TorchBackend,
)


# ----------------------------
# Stats helpers
# ----------------------------
def _median(xs: Sequence[float]) -> float:
    return statistics.median(xs) if xs else float("nan")


def _p95(xs: Sequence[float]) -> float:
    if not xs:
        return float("nan")
    ys = sorted(xs)
    k = int(math.ceil(0.95 * len(ys))) - 1
    k = max(0, min(k, len(ys) - 1))
    return ys[k]


def _fmt(sec: float) -> str:
    if math.isnan(sec):
        return "     n/a"
    if sec < 1e-3:
        return f"{sec * 1e6:8.1f} µs"
    return f"{sec * 1e3:8.3f} ms"


@dataclass
class KernelResult:
    name: str
    np_med: float
    np_p95: float
    torch_med: float
    torch_p95: float


# ----------------------------
# Bench core
# ----------------------------
def _time_fn(fn: Callable[[], object], *, warmup: int, repeats: int) -> List[float]:
    for _ in range(warmup):
        fn()

    times: List[float] = []
    for _ in range(repeats):
        t0 = time.perf_counter()
        fn()
        t1 = time.perf_counter()
        times.append(t1 - t0)
    return times


def _build_kernels(axis: int, alpha: float, beta: float) -> Dict[str, IActivation]:
    return {
        "sigmoid": Sigmoid(),
        "tanh": Tanh(),
        "relu": Relu(),
        "swish": Swish(beta=beta),
        "celu": Celu(alpha=alpha),
        "softmax": Softmax(axis=axis),
        "softmax_unstable": Softmax(axis=axis, stable=False),
    }


def _sanity_check(a: np.ndarray, b: np.ndarray, name: str, dtype: np.dtype) -> None:
    atol = 1e-6 if dtype == np.float32 else 1e-12
    rtol = 1e-5 if dtype == np.float32 else 1e-10
    if not np.allclose(a, b, rtol=rtol, atol=atol, equal_nan=True):
        max_abs = float(np.nanmax(np.abs(a - b)))
        raise AssertionError(f"[sanity] {name} mismatch: max_abs={max_abs}")


def main() -> None:
    ap = argparse.ArgumentParser()
    ap.add_argument(
        "--shape",
        nargs="+",
        type=int,
        default=[256, 1024],
        help="Input shape, e.g. --shape 256 1024",
    )
    ap.add_argument("--dtype", choices=["float32", "float64"], default="float32")
    ap.add_argument("--warmup", type=int, default=20)
    ap.add_argument("--repeats", type=int, default=100)
    ap.add_argument("--axis", type=int, default=-1, help="Softmax axis")
    ap.add_argument("--alpha", type=float, default=1.0, help="Celu alpha")
    ap.add_argument("--beta", type=float, default=1.0, help="Swish beta")
    ap.add_argument(
        "--kernels",
        nargs="*",
        default=["sigmoid", "tanh", "relu", "swish", "celu", "softmax"],
    )
    ap.add_argument(
        "--sanity",
        action="store_true",
        help="Compare NumPy and PyTorch outputs once per kernel",
    )
    args = ap.parse_args()

    shape = tuple(int(x) for x in args.shape)
    dtype = np.dtype(args.dtype)

    print("=" * 96)
    print(
        f"Activation bench NumPy vs PyTorch | shape={shape} dtype={dtype} "
        f"warmup={args.warmup} repeats={args.repeats}"
    )
    print("=" * 96)

    rng = np.random.default_rng(0)
    x = (rng.standard_normal(size=shape) * 4.0).astype(dtype)

    np_backend = NumpyBackend(dtype=dtype)
    try:
        torch_backend = TorchBackend(dtype=dtype)
    except BackendNotAvailableError as exc:
        print(f"[WARN] {exc}; running NumPy-only.")
        torch_backend = None

    kernels = _build_kernels(args.axis, args.alpha, args.beta)
    selected = [k for k in args.kernels if k in kernels]
    if not selected:
        raise SystemExit(f"No valid kernels selected. Choose from: {sorted(kernels)}")

    results: List[KernelResult] = []
    for name in selected:
        kernel = kernels[name]

        np_times = _time_fn(
            lambda: kernel.apply(np_backend, x),
            warmup=args.warmup,
            repeats=args.repeats,
        )
        if torch_backend is not None:
            torch_times = _time_fn(
                lambda: kernel.apply(torch_backend, x),
                warmup=args.warmup,
                repeats=args.repeats,
            )
        else:
            torch_times = []

        if args.sanity and torch_backend is not None:
            _sanity_check(
                kernel.apply(np_backend, x).to_numpy(),
                kernel.apply(torch_backend, x).to_numpy(),
                name=name,
                dtype=dtype,
            )

        results.append(
            KernelResult(
                name=name,
                np_med=_median(np_times),
                np_p95=_p95(np_times),
                torch_med=_median(torch_times),
                torch_p95=_p95(torch_times),
            )
        )

    print("\nResults (median / p95):")
    print("-" * 96)
    print(
        f"{'kernel':18s} | {'numpy_med':>12s} {'numpy_p95':>12s} | "
        f"{'torch_med':>12s} {'torch_p95':>12s} | {'ratio':>8s}"
    )
    print("-" * 96)
    for r in results:
        if r.torch_med > 0:
            ratio_s = f"{r.np_med / r.torch_med:7.2f}x"
        else:
            ratio_s = "   n/a"
        print(
            f"{r.name:18s} | {_fmt(r.np_med):>12s} {_fmt(r.np_p95):>12s} | "
            f"{_fmt(r.torch_med):>12s} {_fmt(r.torch_p95):>12s} | {ratio_s:>8s}"
        )
    print("-" * 96)
    if args.sanity and torch_backend is not None:
        print("Sanity: PASS (all selected kernels)")


if __name__ == "__main__":
    main()
