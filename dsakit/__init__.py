"""Classic data-structure and algorithm routines: arrays, sorting, lookups, stacks, queues and trees."""

__version__ = "0.1.0"
__all__ = ["arrays", "sorting", "lookup", "stacks", "binary_tree", "nary_tree", "bst", "avl"]