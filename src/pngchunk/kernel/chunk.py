import zlib
from dataclasses import dataclass
from struct import Struct
from typing import Iterator, NamedTuple, Protocol, Union

import deal

from .buffer import BufferLike, splice
from .chunk_type import ChunkType
from .structured import StructuredTuple

CRC_MASK = 0xFFFFFFFF


class ChunkError(ValueError):
    pass


class MalformedChunkError(ChunkError):
    def __init__(self, expected: int, given: int) -> None:
        super().__init__(f'Expected chunk of at least {expected} bytes but got {given}')
        self.expected = expected
        self.given = given


class InvalidChunkTypeError(ChunkError):
    def __init__(self, tag: ChunkType) -> None:
        super().__init__(f'Chunk has an invalid chunk type: {tag!r}')
        self.tag = tag


class ChecksumMismatchError(ChunkError):
    def __init__(self, expected: int, actual: int) -> None:
        super().__init__(
            f'The checksum should be {expected:#010x} but found {actual:#010x} instead'
        )
        self.expected = expected
        self.actual = actual


class ChunkDecodeError(ChunkError):
    def __init__(self, reason: str) -> None:
        super().__init__(f'Chunk data is not valid UTF-8: {reason}')
        self.reason = reason


class ChunkHeader(NamedTuple):
    size: int
    etag: bytes


class ChunkTrailer(NamedTuple):
    crc: int


@deal.chain(
    deal.ensure(lambda _: 0 <= _.result <= CRC_MASK),
    deal.safe,
)
def calc_crc(*parts: BufferLike) -> int:
    """CRC-32 (ISO-HDLC, as used by zlib) over the concatenation of given parts."""
    crc = 0
    for part in parts:
        crc = zlib.crc32(part, crc)
    return crc & CRC_MASK


@dataclass(frozen=True)
class Chunk(object):
    """PNG chunk made of 4CC chunk type and data

    tag: chunk type

    data: chunk data, may be empty

    CRC is computed from tag and data whenever requested and never stored.
    """

    tag: ChunkType
    data: bytes

    def __post_init__(self) -> None:
        object.__setattr__(self, 'data', bytes(self.data))

    @classmethod
    def from_bytes(cls, buffer: BufferLike, offset: int = 0) -> 'Chunk':
        return PNG_CHUNK.untag(buffer, offset)

    @property
    def length(self) -> int:
        return len(self.data)

    @property
    def crc(self) -> int:
        return calc_crc(bytes(self.tag), self.data)

    def text(self) -> str:
        try:
            return self.data.decode('utf-8')
        except UnicodeDecodeError as exc:
            raise ChunkDecodeError(str(exc)) from exc

    def __bytes__(self) -> bytes:
        return PNG_CHUNK.pack(self)

    def __iter__(self) -> Iterator[Union[ChunkType, bytes]]:
        return iter((self.tag, self.data))

    def __str__(self) -> str:
        try:
            return self.text()
        except ChunkDecodeError as exc:
            return f'<{exc}>'

    def __repr__(self) -> str:
        return 'Chunk<{tag}>[{size}]'.format(
            tag=self.tag.raw.decode('ascii', 'backslashreplace'),
            size=self.length,
        )


class ChunkFactory(Protocol):
    @property
    def metadata_size(self) -> int:
        ...

    def untag(self, buffer: BufferLike, offset: int = 0) -> Chunk:
        ...

    def mktag(self, tag: ChunkType, data: bytes) -> bytes:
        ...


@dataclass(frozen=True)
class StructuredChunk(ChunkFactory):
    """Chunk layout of header (size, tag), data and CRC trailer.

    Size in header counts data bytes only, CRC covers tag and data.
    """

    header: StructuredTuple[ChunkHeader]
    trailer: StructuredTuple[ChunkTrailer]

    @property
    def metadata_size(self) -> int:
        return self.header.size + self.trailer.size

    @deal.chain(
        deal.pre(lambda _: _.offset >= 0),
        deal.raises(MalformedChunkError, InvalidChunkTypeError, ChecksumMismatchError),
    )
    def untag(self, buffer: BufferLike, offset: int = 0) -> Chunk:
        """Read a single chunk at given offset, ignoring any bytes after it."""
        data = memoryview(buffer)[offset:]
        if len(data) < self.metadata_size:
            raise MalformedChunkError(self.metadata_size, len(data))

        header = self.header.unpack_from(data)
        tag = ChunkType.from_bytes(header.etag)
        if not tag.is_valid():
            raise InvalidChunkTypeError(tag)

        chunk_size = self.metadata_size + header.size
        if len(data) < chunk_size:
            raise MalformedChunkError(chunk_size, len(data))

        chunk = Chunk(tag, splice(data, self.header.size, header.size))
        expected = self.trailer.unpack_from(data, self.header.size + header.size).crc
        actual = chunk.crc
        if actual != expected:
            raise ChecksumMismatchError(expected, actual)
        return chunk

    def mktag(self, tag: ChunkType, data: bytes) -> bytes:
        return self.pack(Chunk(tag, data))

    def pack(self, chunk: Chunk) -> bytes:
        return b''.join(
            (
                self.header.pack(ChunkHeader(chunk.length, bytes(chunk.tag))),
                chunk.data,
                self.trailer.pack(ChunkTrailer(chunk.crc)),
            )
        )


PNG_CHUNK_HEADER = StructuredTuple(('size', 'etag'), Struct('>I4s'), ChunkHeader)
PNG_CHUNK_TRAILER = StructuredTuple(('crc',), Struct('>I'), ChunkTrailer)

PNG_CHUNK = StructuredChunk(PNG_CHUNK_HEADER, PNG_CHUNK_TRAILER)
