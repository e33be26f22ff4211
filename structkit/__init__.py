"""Classic data structures and algorithms: lists, stacks, queues, search, string matching, trees and graphs."""

__version__ = "0.1.0"