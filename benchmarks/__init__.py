"""Performance benchmarks for shortpaths.

This package contains benchmarks for the all-pairs shortest-path computation,
serial and with a threaded Dijkstra phase.
"""
