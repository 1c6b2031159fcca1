"""
Grid path-search engine.

Builds an 8-connected, terrain-weighted graph from a 2-D cost map and
searches it one step at a time with breadth-first, Dijkstra, greedy
best-first or A* strategies, exposing the frontier, explored set and
path after every step.
"""

__version__ = "0.1.0"
