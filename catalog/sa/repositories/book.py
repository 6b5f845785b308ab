# catalog/sa/repositories/book.py
from typing import Optional, List, Sequence

from catalog.models.book import Book as BookModel
from ..exceptions import ConstraintViolationError
from ..models import Book, Series
from .base import EntityRepository, chunked

class BookRepository(EntityRepository[BookModel, Book]):
    model_class = BookModel
    row_class = Book
    kind = "Book"
    mutable_fields = ('name', 'url', 'file_size', 'file_last_modified', 'series_id', 'library_id')
    search_filters = {
        'library_ids': Book.library_id,
        'series_ids': Book.series_id,
    }

    def _check_parents(self, books: Sequence[BookModel]) -> None:
        """Reject books whose library is not the library of their series.

        Raises:
            ConstraintViolationError: the series is unknown or lives in another library
        """
        series_ids = list({book.series_id for book in books})
        series_libraries = {}
        for chunk in chunked(series_ids):
            series_libraries.update(
                self.session.query(Series.id, Series.library_id).filter(Series.id.in_(chunk)).all()
            )
        for book in books:
            if book.series_id not in series_libraries:
                raise ConstraintViolationError(f"Book {book.id} references unknown series: {book.series_id}")
            if series_libraries[book.series_id] != book.library_id:
                raise ConstraintViolationError(
                    f"Book {book.id} is in library {book.library_id} but its series is in "
                    f"library {series_libraries[book.series_id]}"
                )

    def find_all_id_by_library_id(self, library_id: str) -> List[str]:
        """Get the ids of every book in a library without loading the rows.
        
        Args:
            library_id: The library to look in
            
        Returns:
            List of book ids, empty if the library has no books
        """
        return [
            book_id for (book_id,) in
            self.session.query(Book.id).filter(Book.library_id == library_id).all()
        ]

    def find_all_id_by_series_id(self, series_id: str) -> List[str]:
        """Get the ids of every book in a series without loading the rows."""
        return [
            book_id for (book_id,) in
            self.session.query(Book.id).filter(Book.series_id == series_id).all()
        ]

    def find_all_by_series_id(self, series_id: str) -> List[BookModel]:
        rows = self.session.query(Book).filter(Book.series_id == series_id).all()
        return [self._to_model(row) for row in rows]

    def get_library_id(self, book_id: str) -> Optional[str]:
        """Get the library a book belongs to, or None for an unknown book"""
        result = self.session.query(Book.library_id).filter(Book.id == book_id).first()
        return result[0] if result else None
