"""Initialise the parts & products inventory package.

This package contains the SQLite persistence layer for an inventory of
parts (in-house or outsourced) and the products assembled from them. Create
a database with ``PYTHONPATH=src python3 -m infra.db.schema`` and seed it
with ``PYTHONPATH=src python3 -m scripts.sample_data``.
"""

__all__ = []
