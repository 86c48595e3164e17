"""Aggregation module for producer award intervals.

Reads winners through the repository and computes the shortest and
longest gaps between consecutive wins. No writes.
"""
