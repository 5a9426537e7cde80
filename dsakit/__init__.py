"""Classic data-structure and algorithm exercises: strings, numbers, arrays, linked lists, trees and heaps."""

__version__ = "0.1.0"

__all__ = ["strings", "numbers", "arrays", "linked_list", "trees", "heap"]