"""Classic data structures and algorithms: trees, lists, stacks, queues, graphs, ciphers, an LL(1) parser and CPU scheduling."""

__version__ = "0.1.0"