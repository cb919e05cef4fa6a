# Import every table so relationship targets resolve and create_all sees them
from catalog.models.author import Author
from catalog.models.book import Book, BookGenreLink
from catalog.models.genre import Genre

__all__ = ["Author", "Book", "BookGenreLink", "Genre"]
