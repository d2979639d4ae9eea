from __future__ import annotations

import pytest
from conftest import SAMPLE_PNG

from pngchunk.kernel.chunk import Chunk
from pngchunk.kernel.chunk_type import ChunkType
from pngchunk.png import container


def tags(chunks) -> list:
    return [str(chunk.tag) for chunk in chunks]


def test_from_bytes() -> None:
    chunks = container.from_bytes(SAMPLE_PNG)
    assert tags(chunks) == ['IHDR', 'IDAT', 'IEND']
    assert container.to_bytes(chunks) == SAMPLE_PNG


def test_read_chunks_offsets_from_file_start() -> None:
    assert [offset for offset, _ in container.read_chunks(SAMPLE_PNG)] == [8, 33, 57]


def test_from_bytes_rejects_missing_signature() -> None:
    with pytest.raises(container.InvalidSignatureError) as excinfo:
        container.from_bytes(b'not png data')
    assert excinfo.value.signature == b'not png '


def test_strip_signature() -> None:
    assert bytes(container.strip_signature(SAMPLE_PNG)) == SAMPLE_PNG[8:]


def test_append_chunk_before_end(message_chunk: Chunk) -> None:
    chunks = container.from_bytes(SAMPLE_PNG)
    updated = container.append_chunk(chunks, message_chunk)
    assert tags(updated) == ['IHDR', 'IDAT', 'RuSt', 'IEND']
    assert tags(chunks) == ['IHDR', 'IDAT', 'IEND']


def test_append_chunk_without_end(message_chunk: Chunk) -> None:
    assert container.append_chunk([], message_chunk) == [message_chunk]


def test_find_chunk(message_chunk: Chunk) -> None:
    chunks = container.append_chunk(container.from_bytes(SAMPLE_PNG), message_chunk)
    assert container.find_chunk(chunks, ChunkType.from_str('RuSt')) == message_chunk
    assert container.find_chunk(chunks, ChunkType.from_str('tEXt')) is None


def test_remove_chunk(message_chunk: Chunk) -> None:
    chunks = container.append_chunk(container.from_bytes(SAMPLE_PNG), message_chunk)
    remaining, removed = container.remove_chunk(chunks, ChunkType.from_str('RuSt'))
    assert removed == message_chunk
    assert tags(remaining) == ['IHDR', 'IDAT', 'IEND']


def test_remove_missing_chunk() -> None:
    with pytest.raises(container.ChunkNotFoundError):
        container.remove_chunk(container.from_bytes(SAMPLE_PNG), ChunkType.from_str('RuSt'))


def test_path_round_trip(tmp_path, message_chunk: Chunk) -> None:
    path = tmp_path / 'out.png'
    chunks = container.append_chunk(container.from_bytes(SAMPLE_PNG), message_chunk)
    container.to_path(path, chunks)
    assert container.from_path(path) == chunks
