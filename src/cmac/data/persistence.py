"""Plain-text persistence of (input, output) pairs, one "x y" line per pair."""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Tuple

from cmac.utils import get_logger

logger = get_logger("data.persistence")

Pair = Tuple[float, float]


def write_pairs(path: Path | str, pairs: Iterable[Pair]) -> Path:
    path = Path(path)
    path.parent.mkdir(parents=True, exist_ok=True)
    count = 0
    with open(path, "w", encoding="utf-8") as f:
        for x, y in pairs:
            f.write(f"{x} {y}\n")
            count += 1
    logger.debug(f"Wrote {count} pairs to {path}")
    return path


def read_pairs(path: Path | str) -> List[Pair]:
    pairs: List[Pair] = []
    with open(path, "r", encoding="utf-8") as f:
        for lineno, line in enumerate(f, start=1):
            fields = line.split()
            if not fields:
                continue
            if len(fields) != 2:
                raise ValueError(f"{path}:{lineno}: expected two values, got {len(fields)}")
            pairs.append((float(fields[0]), float(fields[1])))
    return pairs
