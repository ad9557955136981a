"""Exception types raised by reactsource."""

from __future__ import annotations


class PreconditionError(ValueError):
    """A caller violated an input contract (non-positive state, wrong lengths, bad data).

    These are not recoverable inside the library. The caller has to fix the
    call; retrying with the same arguments fails the same way.
    """
