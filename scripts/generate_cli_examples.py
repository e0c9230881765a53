from __future__ import annotations

import shutil
import subprocess
import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable

EXAMPLES_ROOT = Path("examples/cli-options")
BASE_ARGS = ["--size", "320x240", "--upper-left=-2.0,1.2", "--lower-right=0.6,-1.2"]


@dataclass
class Example:
    name: str
    args: list[str]
    expected: Path

    def full_args(self) -> list[str]:
        return [sys.executable, "mandel.py", *self.args, "--output", str(self.expected)]


EXAMPLES: list[Example] = [
    Example(
        name="single",
        args=[*BASE_ARGS, "--mode", "Single"],
        expected=EXAMPLES_ROOT / "single" / "overview.png",
    ),
    Example(
        name="multi",
        args=[*BASE_ARGS, "--mode", "Multi"],
        expected=EXAMPLES_ROOT / "multi" / "overview.png",
    ),
    Example(
        name="seahorse",
        args=["--size", "400x300", "--upper-left=-1.20,0.35", "--lower-right=-1,0.20"],
        expected=EXAMPLES_ROOT / "seahorse" / "seahorse.png",
    ),
    Example(
        name="rows-per-band",
        args=[*BASE_ARGS, "--rows-per-band", "16"],
        expected=EXAMPLES_ROOT / "rows-per-band" / "wide-bands.png",
    ),
    Example(
        name="iterations",
        args=[*BASE_ARGS, "--iterations", "32"],
        expected=EXAMPLES_ROOT / "iterations" / "coarse.png",
    ),
    Example(
        name="alpha",
        args=[*BASE_ARGS, "--alpha"],
        expected=EXAMPLES_ROOT / "alpha" / "overview-rgba.png",
    ),
    Example(
        name="format",
        args=[*BASE_ARGS, "--format", "bmp"],
        expected=EXAMPLES_ROOT / "format" / "overview.bmp",
    ),
    Example(
        name="verbose",
        args=[*BASE_ARGS, "--verbose"],
        expected=EXAMPLES_ROOT / "verbose" / "diagnostic.png",
    ),
]


def _ensure_clean(paths: Iterable[Path]) -> None:
    for path in paths:
        if path.exists():
            shutil.rmtree(path)


def main() -> None:
    EXAMPLES_ROOT.mkdir(parents=True, exist_ok=True)
    for example in EXAMPLES:
        print(f"\n[cli-example] {example.name}")
        _ensure_clean([example.expected.parent])
        subprocess.run(example.full_args(), check=True)
        if not example.expected.is_file():
            raise RuntimeError(f"Expected file {example.expected} was not created")
    print("\nAll CLI examples generated successfully.")


if __name__ == "__main__":
    main()
