"""Singly and doubly linked lists of integers, a stack, a queue and a demo command."""

__version__ = "1.0.0"
__all__ = ["cli", "doublylinkedlist", "linkedlist", "queue", "stack"]