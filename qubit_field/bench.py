# qubit_field/bench.py
import argparse, csv, os, platform, socket, time
from datetime import datetime
from pathlib import Path

import numpy as np

from .bloch import bloch_coordinates
from .circuit import Circuit
from .complex_math import format_complex
from .logging_config import setup_logging
from .measurement import probability_of_one, sample

# ---------------------------------------------------------------------

def meta_row():
    return {
        "hostname": socket.gethostname(),
        "timestamp": datetime.now().isoformat(timespec="seconds"),
        "python": platform.python_version(),
        "numpy": np.__version__,
    }

HEADER = ["gates","shots","seed","ones","freq_one","p_one","hostname","timestamp"]

def write_row(path, row):
    """Append a row; the header is written when the file is new."""
    new = not os.path.exists(path)
    if os.path.dirname(path):
        os.makedirs(os.path.dirname(path), exist_ok=True)
    with open(path, "a", newline="") as f:
        w = csv.DictWriter(f, fieldnames=HEADER)
        if new:
            w.writeheader()
        w.writerow(row)

def gates_label(circ):
    return ",".join(g.value for g in circ.ops) or "-"

# ---------------------------------------------------------------------
# subcommands

def positive_int(text):
    n = int(text)
    if n < 1:
        raise argparse.ArgumentTypeError(f"must be >= 1, got {n}")
    return n

def cmd_state(args):
    circ = Circuit.parse(args.gates)
    st = circ.run()
    x, y, z = bloch_coordinates(st)
    print(f"gates  : {gates_label(circ)}")
    print(f"alpha  : {format_complex(st.alpha)}")
    print(f"beta   : {format_complex(st.beta)}")
    print(f"P(1)   : {probability_of_one(st):.4f}")
    print(f"bloch  : ({x:+.4f}, {y:+.4f}, {z:+.4f})")
    return 0

def cmd_sample(args):
    circ = Circuit.parse(args.gates)
    st = circ.run()
    rng = np.random.default_rng(args.seed)
    outcomes = sample(st, args.shots, rng)
    ones = sum(outcomes)
    freq = ones / args.shots if args.shots else float("nan")
    p1 = probability_of_one(st)
    print(f"[run] {gates_label(circ)}  shots={args.shots}  ones={ones}  freq={freq:.4f}  P(1)={p1:.4f}")
    if args.csv:
        m = meta_row()
        write_row(args.csv, {
            "gates": gates_label(circ), "shots": args.shots, "seed": args.seed,
            "ones": ones, "freq_one": f"{freq:.6f}", "p_one": f"{p1:.6f}",
            "hostname": m["hostname"], "timestamp": m["timestamp"],
        })
        print(f"✓ appended to {args.csv}")
    return 0

def time_run(circ, backend, repeat):
    t0 = time.perf_counter()
    for _ in range(repeat):
        st = circ.run(backend=backend, check_norm=False)
    return (time.perf_counter() - t0) * 1e3, st  # ms

def cmd_backends(args):
    circ = Circuit.parse(args.gates)
    results = {}
    for be in ("serial", "numpy"):
        wall, st = time_run(circ, be, args.repeat)
        results[be] = st
        print(f"  {be:<6} wall={wall:.2f} ms  ({args.repeat} runs)")
    d = float(np.max(np.abs(results["serial"].as_numpy() - results["numpy"].as_numpy())))
    print(f"  max |serial - numpy| = {d:.3e}")
    return 0 if d < 1e-9 else 1

# ---------------------------------------------------------------------
def build_parser():
    p = argparse.ArgumentParser(prog="qubit-field",
                                description="Single-qubit state engine: gates, measurement, Bloch coordinates")
    p.add_argument("--log-level", type=str, default=None)
    p.add_argument("--log-file", type=Path, default=None)
    sub = p.add_subparsers(dest="cmd", required=True)

    p_state = sub.add_parser("state", help="apply gates to |0> and print the result")
    p_state.add_argument("--gates", type=str, default="")

    p_sample = sub.add_parser("sample", help="measure the prepared state repeatedly")
    p_sample.add_argument("--gates", type=str, default="H")
    p_sample.add_argument("--shots", type=int, default=1000)
    p_sample.add_argument("--seed", type=int, default=None)
    p_sample.add_argument("--csv", type=str, default=None)

    p_backends = sub.add_parser("backends", help="time serial vs numpy gate application")
    p_backends.add_argument("--gates", type=str, default="H,T,S,Y,X,Z")
    p_backends.add_argument("--repeat", type=positive_int, default=1000)
    return p

def main(argv=None):
    args = build_parser().parse_args(argv)
    setup_logging(args.log_level, args.log_file)

    if args.cmd == "state":
        return cmd_state(args)
    elif args.cmd == "sample":
        return cmd_sample(args)
    elif args.cmd == "backends":
        return cmd_backends(args)

if __name__ == "__main__":
    raise SystemExit(main())
