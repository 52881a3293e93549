"""Memory managers, abstract sequences and networks, hierarchies and trees built from memory blocks."""

__version__ = "0.1.0"