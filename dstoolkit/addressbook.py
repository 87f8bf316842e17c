"""Address book kept in a self-balancing (AVL) binary search tree keyed by ID."""

from __future__ import annotations

import re
import sys
from contextlib import suppress
from dataclasses import dataclass
from pathlib import Path
from typing import Iterator, Optional, TextIO

DEFAULT_CONTACTS = "contacts.txt"
EMPTY_MESSAGE = "No contacts in the address book."

_LEADING_INT = re.compile(r"\s*([+-]?\d+)")


@dataclass
class ContactInfo:
    """The details stored for one contact."""

    name: str = "placeholder name"
    email: str = "[email]"
    phone: str = "XXX-XXX-XXXX"


def _height(node: Optional["Contact"]) -> int:
    return node.height if node is not None else 0


class Contact:
    """A tree node holding one contact."""

    def __init__(self, id: int, info: Optional[ContactInfo] = None) -> None:
        self.id = id
        self.info = info if info is not None else ContactInfo()
        self.parent: Optional[Contact] = None
        self.left: Optional[Contact] = None
        self.right: Optional[Contact] = None
        self.height = 1

    def update_height(self) -> None:
        self.height = 1 + max(_height(self.left), _height(self.right))

    def balance_factor(self) -> int:
        return _height(self.left) - _height(self.right)

    def rotate_right(self) -> "Contact":
        """Rotate this subtree right and return its new root."""
        pivot = self.left
        if pivot is None:
            raise ValueError("cannot rotate right without a left child")
        inner = pivot.right
        pivot.right = self
        self.left = inner
        pivot.parent = self.parent
        self.parent = pivot
        if inner is not None:
            inner.parent = self
        self.update_height()
        pivot.update_height()
        return pivot

    def rotate_left(self) -> "Contact":
        """Rotate this subtree left and return its new root."""
        pivot = self.right
        if pivot is None:
            raise ValueError("cannot rotate left without a right child")
        inner = pivot.left
        pivot.left = self
        self.right = inner
        pivot.parent = self.parent
        self.parent = pivot
        if inner is not None:
            inner.parent = self
        self.update_height()
        pivot.update_height()
        return pivot

    def list_line(self) -> str:
        info = self.info
        return f"ID: {self.id}, Name: {info.name}, Phone: {info.phone}, Email: {info.email}"

    def details(self) -> str:
        info = self.info
        return (
            f"ID: {self.id}\n"
            f"Name: {info.name}\n"
            f"Phone: {info.phone}\n"
            f"Email: {info.email}"
        )

    def __repr__(self) -> str:
        return f"Contact({self.id!r}, {self.info!r})"


class DuplicateIdError(KeyError):
    """Raised when adding a contact whose ID is already taken."""


def _rebalance(node: Contact) -> Contact:
    balance = node.balance_factor()
    if balance > 1:
        assert node.left is not None
        if node.left.balance_factor() < 0:
            node.left = node.left.rotate_left()
        return node.rotate_right()
    if balance < -1:
        assert node.right is not None
        if node.right.balance_factor() > 0:
            node.right = node.right.rotate_right()
        return node.rotate_left()
    return node


def _insert(node: Optional[Contact], contact: Contact) -> Contact:
    if node is None:
        return contact
    if contact.id < node.id:
        child = _insert(node.left, contact)
        node.left = child
    else:
        child = _insert(node.right, contact)
        node.right = child
    child.parent = node
    node.update_height()
    return _rebalance(node)


def _leftmost(node: Contact) -> Contact:
    while node.left is not None:
        node = node.left
    return node


def _remove(node: Optional[Contact], id: int) -> Optional[Contact]:
    if node is None:
        raise KeyError(id)
    if id < node.id:
        node.left = _remove(node.left, id)
        if node.left is not None:
            node.left.parent = node
    elif id > node.id:
        node.right = _remove(node.right, id)
        if node.right is not None:
            node.right.parent = node
    elif node.left is None or node.right is None:
        child = node.left if node.left is not None else node.right
        if child is not None:
            child.parent = node.parent
        return child
    else:
        successor = _leftmost(node.right)
        node.id, node.info = successor.id, successor.info
        node.right = _remove(node.right, successor.id)
        if node.right is not None:
            node.right.parent = node
    node.update_height()
    return _rebalance(node)


def _depth(node: Optional[Contact]) -> int:
    if node is None:
        return 0
    return 1 + max(_depth(node.left), _depth(node.right))


class AddressBook:
    """Contacts ordered by ID in an AVL tree."""

    def __init__(self) -> None:
        self._root: Optional[Contact] = None
        self._size = 0

    @property
    def root(self) -> Optional[Contact]:
        return self._root

    def add(self, id: int, info: Optional[ContactInfo] = None) -> Contact:
        """Insert a new contact; raise DuplicateIdError if the ID is taken."""
        if id in self:
            raise DuplicateIdError(id)
        contact = Contact(id, info)
        self._root = _insert(self._root, contact)
        self._root.parent = None
        self._size += 1
        return contact

    def delete(self, id: int) -> None:
        """Remove the contact with this ID; raise KeyError if there is none."""
        self._root = _remove(self._root, id)
        if self._root is not None:
            self._root.parent = None
        self._size -= 1

    def get(self, id: int) -> Optional[Contact]:
        node = self._root
        while node is not None:
            if id == node.id:
                return node
            node = node.right if id > node.id else node.left
        return None

    def search(self, id: int) -> bool:
        return self.get(id) is not None

    def __contains__(self, id: object) -> bool:
        return isinstance(id, int) and self.search(id)

    def __len__(self) -> int:
        return self._size

    def __iter__(self) -> Iterator[Contact]:
        """Iterate over contacts in ascending ID order."""
        stack: list[Contact] = []
        node = self._root
        while stack or node is not None:
            while node is not None:
                stack.append(node)
                node = node.left
            node = stack.pop()
            yield node
            node = node.right

    def height(self) -> int:
        return _depth(self._root)

    def list_contacts(self) -> str:
        if self._root is None:
            return EMPTY_MESSAGE
        return "\n".join(contact.list_line() for contact in self)

    def structure(self) -> str:
        """Draw the tree level by level, with slashes linking parents to children."""
        if self._root is None:
            return EMPTY_MESSAGE
        max_level = self.height()
        lines: list[str] = []
        level_nodes: list[Optional[Contact]] = [self._root]
        level = 1
        while any(node is not None for node in level_nodes):
            floor = max_level - level
            link = 2 ** max(floor - 1, 0)
            pre = 2**floor - 1
            between = 2 ** (floor + 1) - 1

            ids = " " * pre + "".join(
                (str(node.id) if node is not None else " ") + " " * between
                for node in level_nodes
            )
            lines.append(ids)

            links = []
            for node in level_nodes:
                links.append(" " * max(pre - link, 0))
                if node is None:
                    links.append(" " * (link * 3 + 1))
                    continue
                links.append("/" if node.left is not None else " ")
                links.append(" " * (link * 2 - 1))
                links.append("\\" if node.right is not None else " ")
                links.append(" " * link)
            lines.append("".join(links))

            level_nodes = [
                child
                for node in level_nodes
                for child in ((node.left, node.right) if node is not None else (None, None))
            ]
            level += 1
        return "\n".join(lines)


def parse_contact_line(line: str) -> tuple[int, ContactInfo]:
    """Parse ``id,name,phone,email`` into an ID and its contact details."""
    match = _LEADING_INT.match(line)
    if match is None:
        raise ValueError(f"line does not start with an ID: {line!r}")
    fields = line[match.end() + 1 :].split(",")
    name = fields[0] if len(fields) > 0 else ""
    phone = fields[1] if len(fields) > 1 else ""
    email = fields[2] if len(fields) > 2 else ""
    return int(match.group(1)), ContactInfo(name=name, email=email, phone=phone)


def _tokens(stream: TextIO) -> Iterator[str]:
    for line in stream:
        yield from line.split()


def _read_int(tokens: Iterator[str]) -> int:
    try:
        return int(next(tokens))
    except ValueError:
        return -1


def _prompt(text: str) -> None:
    print(text, end="", flush=True)


def _interactive(book: AddressBook, tokens: Iterator[str]) -> None:
    while True:
        print("1-add contact")
        print("2-search for a contact")
        print("3-delete a contact")
        print("4-list all contacts")
        print("5-display the structure of the address book")
        print("6-exit")
        choice = _read_int(tokens)
        if choice == 1:
            _prompt("please enter the ID of the contact you want to addContact : ")
            id = _read_int(tokens)
            while id in book:
                _prompt("this ID is used in another contact, please enter another ID : ")
                id = _read_int(tokens)
            _prompt("enter the name of the contact : ")
            name = next(tokens)
            _prompt("enter the email of the contact : ")
            email = next(tokens)
            _prompt("enter the phone of the contact : ")
            phone = next(tokens)
            book.add(id, ContactInfo(name=name, email=email, phone=phone))
        elif choice == 2:
            _prompt("enter the ID of the contact you want to search : ")
            contact = book.get(_read_int(tokens))
            if contact is None:
                print("Contact Not Found.")
            else:
                print("Contact Found.")
                print(contact.details())
        elif choice == 3:
            _prompt("please enter the ID of the contact you want to delete : ")
            id = _read_int(tokens)
            while id not in book:
                _prompt("this id doesn't exist, please enter a valid ID : ")
                id = _read_int(tokens)
            book.delete(id)
        elif choice == 4:
            print(book.list_contacts())
        elif choice == 5:
            print(book.structure())
        elif choice == 6:
            print("Goodbye!")
            return
        else:
            print("Invalid choice. Please try again.")


def _from_file(book: AddressBook, path: Path) -> int:
    try:
        text = path.read_text()
    except OSError:
        print("Error opening file.")
        return 1
    for line in text.splitlines():
        if not line.strip():
            continue
        id, info = parse_contact_line(line)
        with suppress(DuplicateIdError):
            book.add(id, info)
    print(book.list_contacts())
    print(book.structure())
    for id in (7, 3, 4):
        with suppress(KeyError):
            book.delete(id)
        print(f"contact with id {id} deleted")
    for id in (3, 5):
        state = "exists" if id in book else "doesn't exist"
        print(f"contact with id {id} {state}")
    print(book.list_contacts())
    print(book.structure())
    return 0


def main(argv: Optional[list[str]] = None) -> int:
    args = sys.argv[1:] if argv is None else list(argv)
    path = Path(args[0]) if args else Path(DEFAULT_CONTACTS)
    book = AddressBook()
    tokens = _tokens(sys.stdin)
    print("Welcome back ya User!")
    print("this is an address book program")
    print("you can add contacts, search for them, delete them, list them or ")
    print("display the structure of the address book")
    print("what do you want to do?")
    print("1-enter the input needed manually")
    print("2-enter the input needed from a file")
    try:
        choice = _read_int(tokens)
        while choice not in (1, 2, 3):
            _prompt("please enter a valid choice : ")
            choice = _read_int(tokens)
        if choice == 1:
            _interactive(book, tokens)
        elif choice == 2:
            return _from_file(book, path)
    except StopIteration:
        return 0
    return 0


if __name__ == "__main__":
    sys.exit(main())