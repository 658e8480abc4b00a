"""
Hash transform: consumes input and yields the digest at the end.
"""

import hashlib

from typing_extensions import override

from fileman.ports.codecs.stream_transform_port import StreamTransformPort


class HashTransform(StreamTransformPort):
    """Wraps a hashlib algorithm; ``finish`` returns the raw digest."""

    def __init__(self, algorithm: str = "sha256"):
        self._hasher = hashlib.new(algorithm)

    @property
    def algorithm(self) -> str:
        return self._hasher.name

    @override
    def process(self, chunk: bytes) -> bytes:
        self._hasher.update(chunk)
        return b""

    @override
    def finish(self) -> bytes:
        return self._hasher.digest()
