"""
Errors raised while ingesting and reshaping observations.
"""


class ReshapeError(ValueError):
    """Base class for ingest and reshape failures."""


class MissingColumnError(ReshapeError):
    """Input table lacks one or more required columns."""

    def __init__(self, missing, available=None):
        self.missing = list(missing)
        msg = f"Missing required column(s): {', '.join(map(repr, self.missing))}"
        if available is not None:
            msg += f" (found: {', '.join(map(repr, available))})"
        super().__init__(msg)


class EmptyResultError(ReshapeError):
    """A period filter matched no observations."""


class DuplicateKeyError(ReshapeError):
    """More than one observation shares a (country, subgroup, period) key."""

    def __init__(self, keys):
        self.keys = [tuple(k) for k in keys]
        preview = "; ".join(" / ".join(map(str, k)) for k in self.keys[:5])
        more = f" (+{len(self.keys) - 5} more)" if len(self.keys) > 5 else ""
        super().__init__(f"Duplicate observations for {len(self.keys)} key(s): {preview}{more}")


class InvalidPeriodError(ReshapeError):
    """Period label is malformed or the requested periods are inconsistent."""
