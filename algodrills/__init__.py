"""Classic data-structure and algorithm exercises: heaps, balanced trees, linked and skip lists, sandpiles, line sliding and palindromes."""

__version__ = "0.1.0"