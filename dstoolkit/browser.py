"""Browser-style back/forward navigation driven by a small command script."""

from __future__ import annotations

import sys
from enum import Enum
from pathlib import Path
from typing import Iterable, Iterator, Optional

DEFAULT_SCRIPT = "tst.txt"
EMPTY = "[]"


class HistoryStack:
    """A last-in, first-out stack of URLs."""

    def __init__(self) -> None:
        self._items: list[str] = []

    def push(self, url: str) -> None:
        self._items.append(url)

    def pop(self) -> str:
        """Remove and return the top URL; raise IndexError when empty."""
        if not self._items:
            raise IndexError("pop from an empty history stack")
        return self._items.pop()

    def top(self) -> Optional[str]:
        """Return the top URL, or None when the stack is empty."""
        return self._items[-1] if self._items else None

    def clear(self) -> None:
        self._items.clear()

    def __len__(self) -> int:
        return len(self._items)

    def __bool__(self) -> bool:
        return bool(self._items)

    def __iter__(self) -> Iterator[str]:
        """Iterate from the top of the stack down."""
        return reversed(self._items)

    def __str__(self) -> str:
        if not self._items:
            return EMPTY
        return "[  " + "".join(f"{url}  " for url in self) + "]"


class Command(Enum):
    VISIT = "visit"
    BACK = "back"
    FORWARD = "forward"


def parse_command(line: str) -> Command:
    """Classify a script line by its third character."""
    if len(line) < 3:
        raise ValueError(f"command line too short: {line!r}")
    marker = line[2]
    if marker == "s":
        return Command.VISIT
    if marker in ("B", "b"):
        return Command.BACK
    return Command.FORWARD


def url_from_line(line: str) -> str:
    """Extract the URL from a line such as ``visit("host/page")``."""
    return line[7 : len(line) - 2]


class BrowserHistory:
    """Back and forward stacks; the current page is the top of the back stack."""

    def __init__(self) -> None:
        self.back_stack = HistoryStack()
        self.forward_stack = HistoryStack()

    def visit(self, url: str) -> None:
        self.forward_stack.clear()
        self.back_stack.push(url)

    def back(self) -> bool:
        """Step back one page; return False when there is nowhere to go."""
        if len(self.back_stack) <= 1:
            return False
        self.forward_stack.push(self.back_stack.pop())
        return True

    def forward(self) -> bool:
        """Step forward one page; return False when there is nowhere to go."""
        if not self.forward_stack:
            return False
        self.back_stack.push(self.forward_stack.pop())
        return True

    def current(self) -> Optional[str]:
        return self.back_stack.top()

    def report(self) -> str:
        return self._report("Back Stack: ")

    def _report(self, back_label: str) -> str:
        current = self.current()
        return (
            f"{back_label}{self.back_stack}\n"
            f"Forward Stack: {self.forward_stack}\n"
            f"Current: {EMPTY if current is None else current}\n\n"
        )


def run_script(lines: Iterable[str]) -> str:
    """Run each command line against a fresh history and return the transcript."""
    history = BrowserHistory()
    out: list[str] = []
    for line in lines:
        command = parse_command(line)
        if command is Command.VISIT:
            history.visit(url_from_line(line))
            out.append("Visiting...\n")
            out.append(history._report("Back Stack: "))
        elif command is Command.BACK:
            out.append("Go Back...\n")
            if history.back():
                out.append(history._report("Back Stack: "))
            else:
                out.append("Can't go back :(\nEnter more URLs pls :)\n\n")
                out.append(history._report("backStack: "))
        else:
            out.append("Go Forward...\n")
            if history.forward():
                out.append(history._report("backStack: "))
            else:
                out.append("Can't go forward :(\nNo history yet :(\n")
                out.append(history._report("backStack: "))
    out.append("\nDone reading file :)\n")
    return "".join(out)


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    name = args[0] if args else DEFAULT_SCRIPT
    try:
        text = Path(name).read_text()
    except OSError:
        print(f"Wrong file name : {name}\nTry again at another time :)")
        return 0
    print(run_script(text.splitlines()), end="")
    return 0


if __name__ == "__main__":
    sys.exit(main())