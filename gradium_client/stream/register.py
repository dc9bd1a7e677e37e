"""First-error-wins holder for fatal session conditions."""

from __future__ import annotations

from gradium_client.errors import GradiumError


class ErrorRegister:
    # Only the dispatcher writes and it never awaits between the check and the
    # store, so readers on the same event loop always see a consistent value.
    def __init__(self) -> None:
        self._error: GradiumError | None = None

    def set_if_absent(self, error: GradiumError) -> bool:
        if self._error is not None:
            return False
        self._error = error
        return True

    def get(self) -> GradiumError | None:
        return self._error


__all__ = ["ErrorRegister"]
