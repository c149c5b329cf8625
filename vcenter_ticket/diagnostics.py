# diagnostics.py
import logging
from dataclasses import dataclass
from typing import Callable


def _never() -> bool:
    return False


def _discard(message: str) -> None:
    pass


@dataclass(frozen=True)
class Diagnostics:
    """
    Debug output sink handed to the resolver and the request service.

    The embedding application decides whether debug output is wanted and where
    it goes. A library host would typically pass its own debug-mode getter and
    debug writer; a command line tool would print to stdout.

    Attributes:
        is_enabled: Returns True when debug output is wanted.
        emit: Writes one debug message.
    """

    is_enabled: Callable[[], bool]
    emit: Callable[[str], None]

    @property
    def enabled(self) -> bool:
        """Check whether debug output is enabled.

        Returns:
            bool: True if messages sent to debug() will be emitted.
        """
        return bool(self.is_enabled())

    def debug(self, message: str) -> None:
        """Emit a debug message if debug output is enabled.

        Args:
            message: The message to emit.
        """
        if self.enabled:
            self.emit(message)

    @classmethod
    def from_logging(cls) -> "Diagnostics":
        """Build a sink that writes to the root logger at DEBUG level."""
        return cls(
            is_enabled=lambda: logging.getLogger().isEnabledFor(logging.DEBUG),
            emit=logging.debug,
        )

    @classmethod
    def disabled(cls) -> "Diagnostics":
        """Build a sink that drops everything."""
        return cls(is_enabled=_never, emit=_discard)
