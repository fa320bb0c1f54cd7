"""Flashcard generator: prompt building, reply parsing and a flip-card UI."""
__version__ = "0.1.0"
