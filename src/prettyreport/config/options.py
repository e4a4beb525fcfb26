# topmark:header:start
#
#   project      : PrettyReport
#   file         : options.py
#   file_relpath : src/prettyreport/config/options.py
#   license      : MIT
#   copyright    : (c) 2025 Olivier Biot
#
# topmark:header:end

"""Report options accepted by the public entry points.

The recognized option set is currently empty. Callers may still pass any mapping:
every key is accepted, recorded in `ReportOptions.ignored`, and has no effect on
rendering. This keeps call sites forward compatible with options added later.
"""

from __future__ import annotations

from collections.abc import Mapping
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Any, Final, cast

from prettyreport.config.logging import get_logger

if TYPE_CHECKING:
    from prettyreport.config.logging import PrettyReportLogger

logger: PrettyReportLogger = get_logger(__name__)

# Keys with an effect on rendering. Empty in the current contract.
RECOGNIZED_KEYS: Final[frozenset[str]] = frozenset()


@dataclass(frozen=True)
class ReportOptions:
    """Immutable snapshot of report options.

    Attributes:
        ignored: Keys supplied by the caller that are not recognized, in input order.
    """

    ignored: tuple[str, ...] = field(default_factory=tuple)

    @classmethod
    def from_mapping(cls, mapping: Mapping[str, Any] | None) -> ReportOptions:
        """Build options from an arbitrary mapping, ignoring unknown keys.

        Args:
            mapping: Caller-supplied options, or None.

        Returns:
            ReportOptions: The options snapshot.
        """
        if not mapping:
            return cls()
        ignored: tuple[str, ...] = tuple(str(k) for k in mapping if k not in RECOGNIZED_KEYS)
        if ignored:
            logger.debug("Ignoring unrecognized report option(s): %s", ", ".join(ignored))
        return cls(ignored=ignored)


def resolve_options(options: object) -> ReportOptions:
    """Normalize the ``options`` argument of the entry points."""
    if isinstance(options, ReportOptions):
        return options
    if options is None or isinstance(options, Mapping):
        return ReportOptions.from_mapping(cast("Mapping[str, Any] | None", options))
    # Non-mapping objects (e.g. a bare ``object()``) carry no keys.
    logger.debug("Ignoring non-mapping report options of type %s", type(options).__name__)
    return ReportOptions()
