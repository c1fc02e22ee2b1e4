from __future__ import annotations

import argparse
import json
import sys
from pathlib import Path

import matplotlib.pyplot as plt

# Allow running as a standalone script from repo root.
ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from snake_cube.explorer import survey  # noqa: E402
from snake_cube.explorer.enumerator import EXPECTED_SUM  # noqa: E402
from snake_cube.viz import plot_survey  # noqa: E402


def main() -> None:
    ap = argparse.ArgumentParser(description="Bounded survey of segment-length sequences")
    ap.add_argument("--steps", type=int, default=30_000)
    ap.add_argument("--workers", type=int, default=4)
    ap.add_argument(
        "--expected-sum",
        type=int,
        default=EXPECTED_SUM,
        help="checksum a candidate must reach to be solved (small values give hits quickly)",
    )
    ap.add_argument("--out", type=Path, default=ROOT / "reports")
    args = ap.parse_args()

    stats = survey(args.steps, args.workers, expected_sum=args.expected_sum)

    args.out.mkdir(parents=True, exist_ok=True)
    (args.out / "survey.json").write_text(json.dumps(stats, indent=2, sort_keys=True))

    plot_survey(stats)
    plt.tight_layout()
    plt.savefig(args.out / "survey.png")
    plt.close()

    print({k: v for k, v in stats.items() if k != "solvable"})
    print(f"solvable: {len(stats['solvable'])}")


if __name__ == "__main__":
    main()
