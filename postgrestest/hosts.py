"""
Adapters between postgrestest and the framework running the test.

A host is the object that owns the test's lifetime:

  - pytest ``FixtureRequest``   cleanup via ``addfinalizer``, failure via ``pytest.fail``
  - ``unittest.TestCase``       cleanup via ``addCleanup``, failure via ``fail``
  - ``contextlib.ExitStack``    cleanup via ``callback``, failure raises ``ProvisionError``
"""

from __future__ import annotations

from collections.abc import Callable
from typing import Any, NoReturn

import pytest

from postgrestest.errors import ProvisionError


def _kind(t: Any) -> str | None:
    if hasattr(t, "addfinalizer"):
        return "pytest"
    if hasattr(t, "addCleanup") and hasattr(t, "fail"):
        return "unittest"
    if hasattr(t, "callback"):
        return "exitstack"
    return None


def check_host(t: Any) -> None:
    """Raise ``TypeError`` unless ``t`` can register cleanups."""
    if _kind(t) is None:
        raise TypeError(
            f"Unsupported test host {type(t).__name__!r}: expected a pytest request, "
            "a unittest.TestCase or a contextlib.ExitStack"
        )


def register_cleanup(t: Any, func: Callable[[], None]) -> None:
    """Run ``func`` once when ``t``'s scope ends, whatever the outcome."""
    kind = _kind(t)
    if kind == "pytest":
        t.addfinalizer(func)
    elif kind == "unittest":
        t.addCleanup(func)
    elif kind == "exitstack":
        t.callback(func)
    else:
        check_host(t)


def fail(t: Any, step: str, exc: BaseException) -> NoReturn:
    """Fail the current test because ``step`` raised ``exc``.

    Must be called from inside the ``except`` block handling ``exc`` so the
    original error stays chained to the failure.
    """
    __tracebackhide__ = True
    kind = _kind(t)
    message = f"postgrestest {step} failed: {exc}"
    if kind == "pytest":
        pytest.fail(message)
    if kind == "unittest":
        t.fail(message)
    raise ProvisionError(step, str(exc)) from exc
