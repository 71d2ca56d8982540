"""Exceptions raised by postgrestest."""

from __future__ import annotations


class ProvisionError(RuntimeError):
    """A scratch database step failed outside a test framework.

    ``step`` names the failing operation (``connect``, ``name``, ``create``,
    ``address``, ``delete`` or ``sequences``).
    """

    def __init__(self, step: str, message: str) -> None:
        super().__init__(f"postgrestest {step} failed: {message}")
        self.step = step
