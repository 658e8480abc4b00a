"""
Brotli compression and decompression transforms backed by the brotli package.
"""

import brotli
from typing_extensions import override

from fileman.exceptions import OperationFailedError
from fileman.ports.codecs.stream_transform_port import StreamTransformPort


class BrotliCompressTransform(StreamTransformPort):
    """Streaming Brotli encoder."""

    def __init__(self, quality: int = 11):
        self._compressor = brotli.Compressor(quality=quality)

    @override
    def process(self, chunk: bytes) -> bytes:
        return self._compressor.process(chunk)

    @override
    def finish(self) -> bytes:
        return self._compressor.finish()


class BrotliDecompressTransform(StreamTransformPort):
    """Streaming Brotli decoder. Corrupt or truncated input raises OperationFailedError."""

    def __init__(self):
        self._decompressor = brotli.Decompressor()

    @override
    def process(self, chunk: bytes) -> bytes:
        try:
            return self._decompressor.process(chunk)
        except brotli.error as e:
            raise OperationFailedError(e) from e

    @override
    def finish(self) -> bytes:
        if not self._decompressor.is_finished():
            raise OperationFailedError(ValueError("Truncated Brotli stream"))
        return b""
