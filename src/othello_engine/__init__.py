"""Othello rules engine and AI opponent."""

__version__ = "0.1.0"
