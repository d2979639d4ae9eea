from typing import Iterable, Iterator, Tuple

from .chunk import Chunk


def assert_tag(target: str, chunk: Chunk) -> bytes:
    """Return chunk data if chunk has target chunk type."""
    if bytes(chunk.tag) != target.encode('ascii'):
        raise ValueError(f'expected tag to be {target} but got {chunk.tag!r}')
    return chunk.data


def print_chunks(
    chunks: Iterable[Tuple[int, Chunk]], base: int = 0
) -> Iterator[Tuple[int, Chunk]]:
    for offset, chunk in chunks:
        print(f'{base + offset} {chunk.tag} {chunk.length} {chunk.crc:#010x}')
        yield base + offset, chunk


def drop_offsets(chunks: Iterable[Tuple[int, Chunk]]) -> Iterator[Chunk]:
    """Drop offset from each (offset, chunk) tuple in given iterator"""
    return (chunk for _, chunk in chunks)
