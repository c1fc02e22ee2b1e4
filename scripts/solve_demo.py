from __future__ import annotations

import sys
from pathlib import Path

ROOT = Path(__file__).resolve().parents[1]
SRC = ROOT / "src"
sys.path.insert(0, str(SRC))

from snake_cube import search  # noqa: E402
from snake_cube.config import DEFAULT_LENGTHS  # noqa: E402


def main() -> None:
    result = search(DEFAULT_LENGTHS)
    solution = result["solution"]
    print({
        "lengths": result["lengths"],
        "solution": None if solution is None else [d.name for d in solution],
        "validations": result["validations"],
        "max_depth": result["max_depth"],
    })


if __name__ == "__main__":
    main()
