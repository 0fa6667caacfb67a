"""
Custom exceptions for the data structures.
"""


class EmptyCollectionError(LookupError):
    """
    Raised when a required element is removed from an empty collection.

    Distinct from a query on an empty collection, which returns None.
    """

    def __init__(self, message: str = "Cannot remove element from an empty collection."):
        super().__init__(message)


class OutOfBoundsError(IndexError):
    """
    Raised when an index falls outside the bounds of an indexed list.
    """

    def __init__(self, index: int, min_index: int, max_index: int):
        """
        Initialize bounds error.

        Args:
            index: The index that was requested.
            min_index: Lowest valid index of the list.
            max_index: Highest valid index of the list (min_index - 1 if empty).
        """
        self.index = index
        self.min_index = min_index
        self.max_index = max_index
        super().__init__(
            f"Index {index} outside of list bounds ({min_index}:{max_index})"
        )
