from contextlib import contextmanager
from typing import Iterable, Iterator, Tuple, Union

from .buffer import BufferLike
from .chunk import Chunk
from .settings import _ChunkSetting

END_TAG = b'IEND'


@contextmanager
def exception_offset_context(offset: int) -> Iterator[None]:
    try:
        yield
    except Exception as exc:
        if not hasattr(exc, 'offset'):
            exc.offset = offset  # type: ignore
        raise exc


def read_chunks(
    cfg: _ChunkSetting, buffer: BufferLike, offset: int = 0
) -> Iterator[Tuple[int, Chunk]]:
    """Read all chunks from given bytes."""
    data = memoryview(buffer)
    max_size = len(data)
    while offset < max_size:
        with exception_offset_context(offset):
            chunk = cfg.untag(data, offset)
        cfg.logger.debug(f'read chunk {chunk!r} at offset {offset}')
        yield offset, chunk
        offset += cfg.metadata_size + chunk.length
        if bytes(chunk.tag) == END_TAG:
            if offset < max_size:
                cfg.logger.warning(
                    f'found {max_size - offset} bytes after IEND chunk, ignoring...'
                )
            return


def write_chunks(cfg: _ChunkSetting, chunks: Iterable[Union[bytes, Chunk]]) -> bytes:
    """Write chunks sequence to bytes."""
    stream = bytearray()
    for chunk in chunks:
        if isinstance(chunk, Chunk):
            chunk = cfg.mktag(chunk.tag, chunk.data)
        stream += chunk
    return bytes(stream)
