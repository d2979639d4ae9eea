from typing import Iterable, Iterator, List, Optional, Sequence, Tuple

from pngchunk.kernel.buffer import BufferLike
from pngchunk.kernel.chunk import Chunk
from pngchunk.kernel.chunk_type import ChunkType
from pngchunk.kernel.resource import END_TAG
from pngchunk.utils.fileio import PathLike, read_file, write_file

from .preset import png


class InvalidSignatureError(ValueError):
    def __init__(self, signature: bytes) -> None:
        super().__init__(f'File is not a valid PNG image, found signature {signature!r}')
        self.signature = signature


class ChunkNotFoundError(LookupError):
    def __init__(self, tag: ChunkType) -> None:
        super().__init__(f'Chunk type {tag} not found')
        self.tag = tag


def strip_signature(buffer: BufferLike) -> memoryview:
    data = memoryview(buffer)
    size = len(png.signature)
    if bytes(data[:size]) != png.signature:
        raise InvalidSignatureError(bytes(data[:size]))
    return data[size:]


def read_chunks(buffer: BufferLike) -> Iterator[Tuple[int, Chunk]]:
    """Read chunks following the signature, offsets are relative to file start."""
    strip_signature(buffer)
    return png.read_chunks(buffer, len(png.signature))


def from_bytes(buffer: BufferLike) -> List[Chunk]:
    return list(png.drop_offsets(read_chunks(buffer)))


def from_path(path: PathLike) -> List[Chunk]:
    return from_bytes(read_file(path))


def to_bytes(chunks: Iterable[Chunk]) -> bytes:
    return png.signature + png.write_chunks(chunks)


def to_path(path: PathLike, chunks: Iterable[Chunk]) -> int:
    return write_file(path, to_bytes(chunks))


def find_chunk(chunks: Iterable[Chunk], tag: ChunkType) -> Optional[Chunk]:
    return next((chunk for chunk in chunks if chunk.tag == tag), None)


def append_chunk(chunks: Sequence[Chunk], chunk: Chunk) -> List[Chunk]:
    """Insert chunk before IEND, or at the end if there is no IEND chunk."""
    position = next(
        (idx for idx, other in enumerate(chunks) if bytes(other.tag) == END_TAG),
        len(chunks),
    )
    png.logger.info(f'adding chunk {chunk!r} at position {position}')
    return [*chunks[:position], chunk, *chunks[position:]]


def remove_chunk(chunks: Sequence[Chunk], tag: ChunkType) -> Tuple[List[Chunk], Chunk]:
    """Remove first chunk of given type, return remaining chunks and removed chunk."""
    for idx, chunk in enumerate(chunks):
        if chunk.tag == tag:
            png.logger.info(f'removing chunk {chunk!r} at position {idx}')
            return [*chunks[:idx], *chunks[idx + 1 :]], chunk
    raise ChunkNotFoundError(tag)
