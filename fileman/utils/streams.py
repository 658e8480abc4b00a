"""Chunked copying between binary streams with an optional transform."""

from typing import BinaryIO, Optional

from fileman.ports.codecs.stream_transform_port import StreamTransformPort

DEFAULT_CHUNK_SIZE = 64 * 1024


def pump(
    source: BinaryIO,
    sink: Optional[BinaryIO],
    transform: Optional[StreamTransformPort] = None,
    chunk_size: int = DEFAULT_CHUNK_SIZE,
) -> bytes:
    """
    Read ``source`` to exhaustion, writing (transformed) chunks to ``sink``.

    Args:
        source: Stream opened for binary reading
        sink: Stream opened for binary writing, or None to discard output
        transform: Optional transform applied to each chunk
        chunk_size: Read size in bytes

    Returns:
        The bytes produced by ``transform.finish()`` when no sink is given,
        otherwise an empty bytes object
    """
    while True:
        chunk = source.read(chunk_size)
        if not chunk:
            break
        data = transform.process(chunk) if transform is not None else chunk
        if data and sink is not None:
            sink.write(data)
    tail = transform.finish() if transform is not None else b""
    if sink is None:
        return tail
    if tail:
        sink.write(tail)
    sink.flush()
    return b""
