"""Diagnostics for arguments outside the physical domain."""

from __future__ import annotations

import math
import warnings


class DomainWarning(RuntimeWarning):
    """Emitted when a loop function receives an argument it is not defined for."""


def domain_error(function: str, argument: str, condition: str = "must not be negative") -> float:
    """Report a domain violation and return the quiet-NaN sentinel.

    The loop functions never raise on bad input.  Instead they call this
    helper, which issues a :class:`DomainWarning` and hands back ``nan`` for
    the caller to return.  Use the standard :mod:`warnings` filters to
    silence the diagnostic or to turn it into an exception.
    """

    warnings.warn(f"ERROR: {function}: {argument} {condition}", DomainWarning, stacklevel=3)
    return math.nan


__all__ = ["DomainWarning", "domain_error"]
