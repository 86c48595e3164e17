"""Ingestion module for the movie list.

Reads the semicolon-delimited CSV and writes it to the database.
"""
