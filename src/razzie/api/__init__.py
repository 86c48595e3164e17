"""API module for razzie.

The api layer reads the database and returns payloads.
Interval computation lives in razzie.aggregation.
"""
