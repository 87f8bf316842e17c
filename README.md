# dstoolkit

A small collection of classic data structures. Each one comes with a small
program that shows it at work:

| Module                  | What it holds                                            |
|-------------------------|----------------------------------------------------------|
| `dstoolkit.browser`     | Back/forward browser history built on two stacks         |
| `dstoolkit.addressbook` | An address book kept in a self-balancing (AVL) tree      |
| `dstoolkit.bitflips`    | Minimum number of k-length bit flips to make all ones    |
| `dstoolkit.triage`      | An emergency-room queue on a max-heap of patients        |

The package uses only the standard library. It needs Python 3.10 or later.

## Installing

```
pip install .
```

To run the tests:

```
pip install ".[test]"
pytest
```

## Commands

Each module has a command. Each command takes an optional file path as its
first argument.

```
dstoolkit-browser [SCRIPT]        # default: tst.txt
dstoolkit-addressbook [CONTACTS]  # default: contacts.txt
dstoolkit-bitflips [CASES]        # default: problem3.txt
dstoolkit-triage [PATIENTS]       # default: patients.txt
```

### `dstoolkit-browser`

Replays a script of navigation lines. After every step it prints both
stacks and the current page. A line is classified by its third character:

- `s` means visit.
- `b` or `B` means back.
- Anything else means forward.

For a visit, the URL is the text from the eighth character up to the last
two. For example:

```
visit("a.example.com")
visit("b.example.com")
goBack()
goForward()
```

If the file cannot be read, the command prints a message and exits.

### `dstoolkit-addressbook`

Reads its answers from standard input. Its first menu has two choices:

- **1** gives an interactive menu: add, search, delete, list contacts,
  draw the tree, exit.
- **2** loads the contacts file. Each line has the form `id,name,phone,email`.
  The command lists the contacts and draws the tree. It then deletes ids 7,
  3 and 4, reports whether ids 3 and 5 still exist, and lists and draws the
  book again.

### `dstoolkit-bitflips`

Shows a menu on standard input with these choices:

- **1–3** run that case from the case file.
- **4** runs every case in the file.
- **5** reads `n`, `k` and `n` bits from standard input.

### `dstoolkit-triage`

Shows a menu on standard input with these choices:

- **1** adds a patient.
- **2** treats the most urgent patient.
- **3** peeks at the next patient.
- **4** shows the queue.
- **5** loads `name severity arrival` triples from the patients file.
- **0** exits.

## Using the library

### Browser history

```python
from dstoolkit.browser import BrowserHistory

history = BrowserHistory()
history.visit("a.example.com")
history.visit("b.example.com")
history.back()
print(history.current())   # a.example.com
history.forward()
print(history.current())   # b.example.com
print(history.report())    # both stacks and the current page
```

Visiting a page clears the forward stack.

- `back()` needs at least two pages in the back stack. `forward()` needs a
  non-empty forward stack. Each returns `False` when it cannot move.
- `current()` returns `None` when nothing has been visited.

`HistoryStack` is the stack used underneath. It supports `push`, `pop`,
`top`, `clear`, `len()`, truth testing, iteration from the top down and
`str()`. `pop` raises `IndexError` on an empty stack.

These helpers handle scripts directly:

- `parse_command` returns a `Command` (`VISIT`, `BACK`, `FORWARD`) for a line.
- `url_from_line` extracts the URL from a line.
- `run_script` returns the full transcript for an iterable of lines.

### Address book

```python
from dstoolkit.addressbook import AddressBook, ContactInfo

book = AddressBook()
book.add(7, ContactInfo(name="Ada", email="ada@example.com", phone="XXX-XXX-XXXX"))
book.add(3, ContactInfo(name="Bob", email="bob@example.com", phone="XXX-XXX-XXXX"))

print(3 in book)            # True
print(book.get(7).details())
print(book.list_contacts()) # one line per contact, in id order
print(book.structure())     # the tree drawn level by level
book.delete(3)
```

Adding or removing contacts:

- `add` raises `DuplicateIdError` if the id is already present.
- `delete` raises `KeyError` if the id is absent.

Looking contacts up:

- `get` returns the `Contact` or `None`.
- `search` and `in` return a bool.
- Iterating over the book yields contacts in ascending id order.

The tree rebalances itself after every insertion and deletion, so
`book.height()` stays logarithmic in `len(book)`.

`ContactInfo` has defaults for name, email and phone. `parse_contact_line`
turns an `id,name,phone,email` line into an id and a `ContactInfo`.

### Minimum k-bit flips

```python
from dstoolkit.bitflips import min_k_bit_flips

min_k_bit_flips([0, 1, 0], 1)                 # 2
min_k_bit_flips([1, 1, 0], 2)                 # -1, impossible
min_k_bit_flips([0, 0, 0, 1, 0, 1, 1, 0], 3)  # 3
```

A `k` that is not positive raises `ValueError`.

These helpers work with case files:

- `read_cases` parses a case file into `TestCase` values. The file holds a
  count, then `n`, `k` and `n` bits for each case.
- `format_case` renders a case's input.
- `run_case` renders a case together with its answer.

### Emergency room

```python
from dstoolkit.triage import EmergencyRoom

room = EmergencyRoom()
room.add_patient("Ann", 5, 1)
room.add_patient("Ben", 9, 2)
room.add_patient("Cat", 9, 3)

print(room.peek_patient())    # Ben: highest severity, earliest arrival
print(room.treat_patient())   # Ben
print(room.queue_text())      # Heap: [ ... ]
```

Patients with higher severity come first. Between equal severities, the
patient who arrived earlier wins.

`add_patient` raises `ValueError` in any of these cases:

- The name is empty.
- The severity is not positive.
- The arrival time is not positive.

Treating or peeking at an empty room raises `HeapEmptyError`.

`MaxHeap` is a general max-heap for any values that support `>`.
`load_patients` parses `name severity arrival` triples from text. It stops
at the first malformed triple.

## What the package does not do

Nothing is saved between runs. The address book and the triage queue live
only in memory, and their commands start empty each time.