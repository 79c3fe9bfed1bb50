"""Falling-block puzzle game for the terminal: rules, state machine and curses view."""

__version__ = "1.0.0"