# catalog/sa/exceptions.py

class RepositoryError(Exception):
    """Base class for errors raised by the catalog repositories"""

class NotFoundError(RepositoryError):
    """The requested record does not exist"""

    def __init__(self, kind: str, record_id: str):
        self.kind = kind
        self.record_id = record_id
        super().__init__(f"{kind} not found: {record_id}")

class ConstraintViolationError(RepositoryError):
    """A write was rejected because of a duplicate id or a missing parent record"""

class TransactionFailureError(RepositoryError):
    """The backing store failed while executing or committing a transaction"""
