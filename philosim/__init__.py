"""Threaded simulation of the dining philosophers problem: argument parsing, the simulation and its command."""

__version__ = "1.0.0"
__all__ = ["parsing", "simulation", "cli"]