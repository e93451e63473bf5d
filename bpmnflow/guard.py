"""Strict-warning guard for fallible operations.

The XML toolchain reports some malformed-document and schema problems as
diagnostics rather than exceptions. Running an operation under the guard
turns every warning of the selected category into a ``GuardError`` so such
problems cannot go unnoticed.

The guard relies on the process-wide ``warnings`` filter list. It is scoped
to the guarded call and restored on every exit path, but two threads running
guarded calls at the same time would share it, so the guard is meant for
single-threaded use.
"""

import warnings
from collections.abc import Callable, Iterator
from contextlib import contextmanager
from typing import TypeVar

from bpmnflow.common.exceptions import GuardError

T = TypeVar("T")


@contextmanager
def strict_warnings(category: type[Warning] = Warning) -> Iterator[None]:
    """
    Turn warnings of ``category`` raised inside the block into ``GuardError``.

    Exceptions raised explicitly inside the block propagate unchanged. The
    previous warnings filters are restored when the block exits.

    Args:
        category: Warning class acting as the severity mask

    Raises:
        GuardError: If a matching warning is emitted inside the block
    """
    with warnings.catch_warnings():
        warnings.simplefilter("error", category)
        try:
            yield
        except category as warning:
            raise GuardError(str(warning), category=type(warning)) from warning


def run_guarded(body: Callable[[], T], category: type[Warning] = Warning) -> T:
    """
    Run ``body`` under ``strict_warnings`` and return its result.

    Args:
        body: Zero-argument callable to run
        category: Warning class acting as the severity mask

    Returns:
        Whatever ``body`` returns

    Raises:
        GuardError: If ``body`` emits a matching warning
    """
    with strict_warnings(category):
        return body()


__all__ = ["strict_warnings", "run_guarded"]
