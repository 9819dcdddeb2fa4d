"""Programmer-misuse signal for Result accessors.

Domain failures travel as data inside ``Failure``. This module holds the one
exception the core raises on its own: reading ``value`` from a Failure or
``error`` from a Success. That is a logic defect at the call site, so it is
a ``RuntimeError`` and is not expected to be caught.
"""


class ResultAccessError(RuntimeError):
    """Raised when a Result accessor is used on the wrong variant."""

    def __init__(self, *, accessor: str, variant: str) -> None:
        """Initialize result access error.

        Args:
            accessor: Accessor that was read ("value" or "error").
            variant: Name of the variant it was read on.
        """
        super().__init__(f"Tried to access `{accessor}` on a {variant} result.")
        self.accessor = accessor
        self.variant = variant
