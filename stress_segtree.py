import argparse
import sys

from segtree.stress import run_stress

# Parse settings
parser = argparse.ArgumentParser(
    description="Cross-check the segment tree against a linear fold."
)
parser.add_argument(
    "--size", type=int, default=1024, metavar="N", help="number of elements."
)
parser.add_argument(
    "--ops",
    type=int,
    default=None,
    metavar="M",
    help="number of random operations (default: same as size).",
)
parser.add_argument(
    "--max-inner", type=int, default=16, help="maximum length of each element."
)
parser.add_argument(
    "--set-prob", type=float, default=0.5, help="the probability of a point update."
)
parser.add_argument(
    "--seed", type=int, default=0, metavar="S", help="random seed (default: 0)."
)
parser.add_argument(
    "--progress", action="store_true", default=False, help="show a progress bar."
)
args = parser.parse_args()

report = run_stress(
    size=args.size,
    ops=args.ops,
    max_inner=args.max_inner,
    set_prob=args.set_prob,
    seed=args.seed,
    progress=args.progress,
)

print(
    f"Size {args.size}, seed {args.seed}: {report.sets} updates, "
    f"{report.queries} queries, {len(report.mismatches)} mismatches"
)
for mismatch in report.mismatches[:10]:
    print(f"  {mismatch.op} [{mismatch.left}, {mismatch.right}] differs from the reference")

sys.exit(1 if report.mismatches else 0)
