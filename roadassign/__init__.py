"""Graphs, shortest-path searches, heaps, kd-trees and assignment helpers for road networks."""

__version__ = "0.1.0"