"""Reference solutions to classic array, string, sliding-window and linked-list problems."""

__version__ = "0.1.0"
__all__ = ["arrays", "sliding_window", "strings", "linked_list"]