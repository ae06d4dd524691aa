"""
Burst scheduler package.

Simulates First-Come-First-Serve and Round-Robin CPU scheduling over a fixed
list of CPU bursts and reports the average wait time.
"""

__all__ = ["cli"]
