"""Emergency-room triage queue built on a binary max-heap."""

from __future__ import annotations

import sys
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Generic, Iterator, Optional, TextIO, TypeVar

DEFAULT_PATIENTS = "patients.txt"

T = TypeVar("T")


class HeapEmptyError(RuntimeError):
    """Raised when reading from an empty heap."""

    def __init__(self) -> None:
        super().__init__("Heap is empty")


class MaxHeap(Generic[T]):
    """Array-backed max-heap ordered by the items' ``>`` operator."""

    def __init__(self, capacity: int = 100) -> None:
        if capacity < 1:
            raise ValueError("capacity must be positive")
        self.capacity = capacity
        self._items: list[T] = []

    def _sift_up(self, index: int) -> None:
        items = self._items
        while index > 0:
            parent = (index - 1) // 2
            if not items[index] > items[parent]:
                return
            items[index], items[parent] = items[parent], items[index]
            index = parent

    def _sift_down(self, index: int) -> None:
        items = self._items
        size = len(items)
        while True:
            largest = index
            for child in (2 * index + 1, 2 * index + 2):
                if child < size and items[child] > items[largest]:
                    largest = child
            if largest == index:
                return
            items[index], items[largest] = items[largest], items[index]
            index = largest

    def insert(self, value: T) -> None:
        if len(self._items) == self.capacity:
            self.capacity *= 2
        self._items.append(value)
        self._sift_up(len(self._items) - 1)

    def extract_max(self) -> T:
        if not self._items:
            raise HeapEmptyError()
        top = self._items[0]
        last = self._items.pop()
        if self._items:
            self._items[0] = last
            self._sift_down(0)
        return top

    def peek(self) -> T:
        if not self._items:
            raise HeapEmptyError()
        return self._items[0]

    def __len__(self) -> int:
        return len(self._items)

    def __iter__(self) -> Iterator[T]:
        """Iterate in heap-array order."""
        return iter(self._items)

    def __str__(self) -> str:
        return "Heap: [ " + ", ".join(map(str, self._items)) + " ]"


@dataclass(frozen=True)
class Patient:
    """A patient; higher severity first, then earlier arrival."""

    name: str
    severity: int
    arrival_time: int

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, Patient):
            return NotImplemented
        if self.severity == other.severity:
            return self.arrival_time < other.arrival_time
        return self.severity > other.severity

    def __str__(self) -> str:
        return self.name


class EmergencyRoom:
    """Queue of waiting patients, most urgent first."""

    def __init__(self) -> None:
        self._patients: MaxHeap[Patient] = MaxHeap()

    def add_patient(self, name: str, severity: int, arrival_time: int) -> Patient:
        if not name or severity <= 0 or arrival_time <= 0:
            raise ValueError("Invalid input")
        patient = Patient(name, severity, arrival_time)
        self._patients.insert(patient)
        return patient

    def treat_patient(self) -> Patient:
        return self._patients.extract_max()

    def peek_patient(self) -> Patient:
        return self._patients.peek()

    def queue_text(self) -> str:
        return str(self._patients)

    def __len__(self) -> int:
        return len(self._patients)


def load_patients(text: str) -> list[tuple[str, int, int]]:
    """Read ``name severity time`` triples, stopping at the first malformed one."""
    tokens = text.split()
    entries = []
    for start in range(0, len(tokens) - 2, 3):
        name, severity, time = tokens[start : start + 3]
        try:
            entries.append((name, int(severity), int(time)))
        except ValueError:
            break
    return entries


_MENU = (
    "\n1. Add new patient\n"
    "2. Treat next patient\n"
    "3. View next patient\n"
    "4. Display all patients\n"
    "5. Add sample data (10 patients)\n"
    "0. Exit\n"
    "Enter your choice: "
)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _admit(room: EmergencyRoom, name: str, severity: int, time: int) -> None:
    try:
        room.add_patient(name, severity, time)
    except ValueError:
        print("Invalid input")
        return
    print(f"Inserting: {name}")
    print(room.queue_text())


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    sample_path = Path(args[0]) if args else Path(DEFAULT_PATIENTS)
    room = EmergencyRoom()
    tokens = _tokens(sys.stdin)
    print("Emergency Room Priority Queue System")
    print("===================================")
    try:
        while True:
            print(_MENU, end="", flush=True)
            try:
                choice = int(next(tokens))
            except ValueError:
                choice = -1
            if choice == 0:
                print("Exiting program...")
                return 0
            if choice == 1:
                print("Enter patient name: ", end="", flush=True)
                name = next(tokens)
                print("Enter severity (1-100): ", end="", flush=True)
                severity = int(next(tokens))
                print("Enter arrival time: ", end="", flush=True)
                time = int(next(tokens))
                _admit(room, name, severity, time)
                print(f"Patient {name} added successfully.")
            elif choice == 2:
                try:
                    print(f"Treating patient: {room.treat_patient()}")
                except HeapEmptyError:
                    print("No patients in queue.")
            elif choice == 3:
                try:
                    print(f"Next patient to be treated: {room.peek_patient()}")
                except HeapEmptyError:
                    print("No patients in queue.")
            elif choice == 4:
                print("Current queue: ", end="")
                print(room.queue_text())
            elif choice == 5:
                print("Adding sample data from file...")
                try:
                    text = sample_path.read_text()
                except OSError:
                    print(f"Error: Could not open {sample_path.name}")
                    continue
                for name, severity, time in load_patients(text):
                    _admit(room, name, severity, time)
                    print()
            else:
                print("Invalid choice. Please try again.")
    except (StopIteration, ValueError):
        return 0


if __name__ == "__main__":
    sys.exit(main())