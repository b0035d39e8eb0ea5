"""Solutions to classic array, string, book-allocation and contest problems."""

__version__ = "0.1.0"
__all__ = ["arrays", "cli", "contest", "pages", "strings"]