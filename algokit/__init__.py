"""Classic algorithms on sequences, strings, matrices, linked lists and binary trees."""

__version__ = "0.1.0"
__all__ = [
    "arithmetic",
    "arrays",
    "linked",
    "matrices",
    "searching",
    "strings",
    "trees",
    "two_pointers",
]