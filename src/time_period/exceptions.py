from collections.abc import Iterable


class PeriodError(Exception):
    """Base exception for all period-related errors."""


class PeriodValidationError(PeriodError):
    """Raised when a period cannot be constructed from the values given, or an operation is
    given an argument it cannot work with (such as a non-finite scale factor)."""


class PeriodOverflowError(PeriodError):
    """Raised when the result of an operation does not fit into the fields of a Period."""

    def __init__(
        self,
        msg: str | None = None,
        input: str | None = None,
        fields: Iterable[str] | None = None,
    ):
        self.input = input or ""
        self.fields = list(fields) if fields is not None else []
        if not msg:
            msg = f"{self.input}: integer overflow occurred in {','.join(self.fields)}"
        super().__init__(msg)
