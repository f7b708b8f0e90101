"""Classic data structures and algorithms: sorting, searching, arrays, stacks, queues, recursion and flood fill."""

__version__ = "0.1.0"
__all__ = ["arrays", "floodfill", "queues", "recursion", "searching", "sorting", "stack"]