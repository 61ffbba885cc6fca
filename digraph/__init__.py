"""Directed graphs stored as adjacency lists."""
