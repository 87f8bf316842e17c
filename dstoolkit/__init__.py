"""Classic data structures with small programs built around them: browser
history stacks, an AVL address book, minimum k-bit flips and an
emergency-room priority queue."""

__version__ = "0.1.0"