"""Product API.

A small HTTP service exposing products stored in a relational database.
"""

__version__ = "0.1.0"
