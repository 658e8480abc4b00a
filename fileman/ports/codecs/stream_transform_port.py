"""
Port for chunk-wise byte transforms (compression codecs, hashes).
"""

from abc import ABC, abstractmethod


class StreamTransformPort(ABC):
    """A stateful transform fed one chunk at a time."""

    @abstractmethod
    def process(self, chunk: bytes) -> bytes:
        """
        Feed one chunk of input.

        Args:
            chunk: Next input bytes

        Returns:
            Output bytes available so far (possibly empty)
        """
        pass

    @abstractmethod
    def finish(self) -> bytes:
        """
        Signal end of input.

        Returns:
            Remaining output bytes (for a hash: the raw digest)

        Raises:
            OperationFailedError: If the input was incomplete or corrupt
        """
        pass
