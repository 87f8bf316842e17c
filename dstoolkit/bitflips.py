"""Minimum number of k-wide bit flips needed to turn an array into all ones."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, TextIO

DEFAULT_CASES = "problem3.txt"
IMPOSSIBLE = -1


def min_k_bit_flips(bits: Sequence[int], k: int) -> int:
    """Return the fewest k-length flips that make every bit 1, or -1 if none do."""
    if k <= 0:
        raise ValueError("k must be positive")
    n = len(bits)
    flipped_at = [0] * n
    current = 0
    count = 0
    for i, bit in enumerate(bits):
        if i >= k:
            current ^= flipped_at[i - k]
        if (bit + current) % 2 == 0:
            if i + k > n:
                return IMPOSSIBLE
            flipped_at[i] = 1
            current ^= 1
            count += 1
    return count


@dataclass(frozen=True)
class TestCase:
    """One array of bits with its flip width."""

    __test__ = False

    bits: tuple[int, ...]
    k: int


def _int_tokens(tokens: Iterable[str]) -> Iterator[int]:
    for token in tokens:
        yield int(token)


def _take(numbers: Iterator[int]) -> int:
    try:
        return next(numbers)
    except StopIteration:
        raise ValueError("unexpected end of input") from None


def read_cases(text: str) -> list[TestCase]:
    """Parse a case count followed by ``n k`` and ``n`` bits for each case."""
    numbers = _int_tokens(text.split())
    count = _take(numbers)
    cases = []
    for _ in range(count):
        n = _take(numbers)
        k = _take(numbers)
        bits = tuple(_take(numbers) for _ in range(n))
        cases.append(TestCase(bits, k))
    return cases


def format_case(case: TestCase) -> str:
    return "Input array: [" + ", ".join(map(str, case.bits)) + f"], k = {case.k}"


def run_case(case: TestCase) -> str:
    return f"{format_case(case)}\nOutput: {min_k_bit_flips(case.bits, case.k)}"


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _load(path: Path) -> Optional[list[TestCase]]:
    try:
        text = path.read_text()
    except OSError:
        print(f"Failed to open file: {path}")
        return None
    return read_cases(text)


def _run_from_file(path: Path, choice: int) -> None:
    cases = _load(path)
    if cases is None:
        return
    if not 1 <= choice <= len(cases):
        print("Invalid test case choice.")
        return
    print(f"Test Case {choice}:")
    print(run_case(cases[choice - 1]))


def _run_all(path: Path) -> None:
    cases = _load(path)
    if cases is None:
        return
    for number, case in enumerate(cases, start=1):
        print(f"Test Case {number}:")
        print(run_case(case))
        print()


def _run_manual(tokens: Iterator[str]) -> None:
    numbers = _int_tokens(tokens)
    print("Enter the size of the array (n): ", end="", flush=True)
    n = _take(numbers)
    print("Enter the segment size (k): ", end="", flush=True)
    k = _take(numbers)
    print("Enter the array elements (0 or 1) separated by spaces: ", end="", flush=True)
    bits = tuple(_take(numbers) for _ in range(n))
    print(run_case(TestCase(bits, k)))


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else Path(DEFAULT_CASES)
    tokens = _tokens(sys.stdin)
    print(
        "Menu:\n"
        "1. Run Test Case 1\n"
        "2. Run Test Case 2\n"
        "3. Run Test Case 3\n"
        "4. Run All Test Cases\n"
        "5. Enter Test Case Manually\n"
        "Enter your choice: ",
        end="",
        flush=True,
    )
    try:
        choice = int(next(tokens))
    except (StopIteration, ValueError):
        choice = 0
    if 1 <= choice <= 3:
        _run_from_file(path, choice)
    elif choice == 4:
        _run_all(path)
    elif choice == 5:
        _run_manual(tokens)
    else:
        print("Invalid choice.")
    return 0


if __name__ == "__main__":
    sys.exit(main())