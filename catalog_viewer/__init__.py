"""Catalog Viewer.

Fetches a product catalog from a REST endpoint and serves it as a
searchable, sortable, paginated HTML table.
"""

__version__ = "0.1.0"
