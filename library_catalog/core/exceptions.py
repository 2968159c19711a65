class BookNotFoundException(Exception):
    """Raised when an operation targets a book id that has no catalog record"""

    def __init__(self, book_id):
        self.book_id = book_id
        super().__init__(f"Book {book_id} not found")


class InvalidCriterionException(ValueError):
    """Raised when a search criterion is empty or whitespace only"""
    pass
