"""Grid puzzle helpers - coordinates, grids, and Dijkstra search.

This package collects the data structures that keep coming back when solving
grid-based puzzles: row/column locations, hexagonal axial coordinates, a
rectangular grid container, and a shortest-path search that works over any
node type and any cost storage.
"""

__version__ = "1.0.0"
__author__ = "Gridkit"
