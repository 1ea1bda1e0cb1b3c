"""Solutions to classic array and number puzzles, one function per module."""

__version__ = "0.1.0"
__all__ = [
    "container",
    "median",
    "palindrome",
    "remove_duplicates",
    "remove_element",
    "two_sum",
]