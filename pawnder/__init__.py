"""Chess engine building blocks: board geometry, position hashing, killer moves, opening book, time control, messages and options."""

__version__ = "1.0.0"