"""Entities organised by business concept.

Each entity package keeps related code together:
- entity.py: immutable domain model and request payload
- table.py: database persistence model
- repository.py: data access layer
"""

from .book import Book, BookDetails, BookRepository, BookTable

__all__ = ["Book", "BookDetails", "BookRepository", "BookTable"]
