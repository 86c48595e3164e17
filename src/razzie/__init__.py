"""Razzie: producer award interval service.

Loads the worst-picture movie list from CSV into SQLite and reports the
producers with the shortest and longest gaps between consecutive wins.
"""

__version__ = "0.1.0"
