"""Side channel for errors that must not stop report generation."""

import logging
from collections.abc import Sequence
from dataclasses import dataclass, field

log = logging.getLogger(__name__)


@dataclass(frozen=True, kw_only=True)
class ReportError:
    """A recoverable error recorded during a report run."""

    message: str
    cause: BaseException | None = None


@dataclass(frozen=True, kw_only=True)
class ErrorCollector:
    """Collects recoverable errors and logs each one as it arrives."""

    _errors: list[ReportError] = field(default_factory=list)

    def error(self, message: str, cause: BaseException | None = None) -> None:
        """Record an error and carry on."""
        if cause is not None:
            log.error("%s: %s", message, cause)
        else:
            log.error("%s", message)
        self._errors.append(ReportError(message=message, cause=cause))

    @property
    def errors(self) -> Sequence[ReportError]:
        """Errors recorded so far, oldest first."""
        return tuple(self._errors)
