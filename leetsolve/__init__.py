"""Solutions to classic algorithm exercises over lists, trees, grids, arrays and strings."""

__version__ = "0.1.0"
__all__ = ["arrays", "grid", "linked_list", "min_stack", "strings", "tree"]