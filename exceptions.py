class RentalException(Exception):
     """Base exception"""

     pass


class NotFoundError(RentalException):
     """Referenced record does not exist"""

     pass


class ConflictError(RentalException):
     """Operation not permitted in the record's current state"""

     pass


class TransactionError(RentalException):
     """Unexpected persistence failure; the transaction was rolled back"""

     pass
