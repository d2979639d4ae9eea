import logging
from dataclasses import dataclass
from operator import attrgetter

from .buffer import BufferLike
from .chunk import PNG_CHUNK, Chunk, ChunkFactory
from .chunk_type import ChunkType

PNG_SIGNATURE = b'\x89PNG\r\n\x1a\n'


@dataclass(frozen=True)
class _ChunkSetting(ChunkFactory):
    """Setting for chunk streams

    chunk: bytes <-> Chunk (default PNG_CHUNK) -
        factory to read/write chunk layout

    logger: logger used when walking chunk streams
    """

    chunk: ChunkFactory = PNG_CHUNK
    logger: logging.Logger = logging.root

    @property
    def metadata_size(self) -> int:
        return self.chunk.metadata_size

    def untag(self, buffer: BufferLike, offset: int = 0) -> Chunk:
        """Read chunk from given buffer."""
        return self.chunk.untag(buffer, offset=offset)

    def mktag(self, tag: ChunkType, data: bytes) -> bytes:
        """Create chunk bytes from given tag and data."""
        buffer = self.chunk.mktag(tag, data)
        assert not tag.is_valid() or attrgetter('tag', 'data')(
            self.chunk.untag(buffer)
        ) == (tag, data)
        return buffer


@dataclass(frozen=True)
class _FileSetting(_ChunkSetting):
    """Setting for chunk files

    contains all fields from _ChunkSetting, and the following:

    signature: magic bytes preceding the first chunk
    """

    signature: bytes = PNG_SIGNATURE
