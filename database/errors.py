class DataStoreError(Exception):
    """Base class for failures surfaced by the store.

    detail carries the storage engine's message verbatim.
    """

    kind = "DataStoreError"

    def __init__(self, detail: str):
        super().__init__(detail)
        self.detail = detail

    def __str__(self) -> str:
        return f"{self.kind}: {self.detail}"


class InsertError(DataStoreError):
    """A write failed: constraint violation, bad parameter or I/O error."""

    kind = "InsertError"


class QueryError(DataStoreError):
    """A read or aggregate failed."""

    kind = "QueryError"
