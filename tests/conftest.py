from __future__ import annotations

import base64

import pytest

from pngchunk.kernel.chunk import Chunk
from pngchunk.kernel.chunk_type import ChunkType

MESSAGE = b'This is where your secret message will be!'
MESSAGE_CRC = 2882656334

# 1x1 RGB image: IHDR at 8, IDAT at 33, IEND at 57
SAMPLE_PNG = base64.b64decode(
    "iVBORw0KGgoAAAANSUhEUgAAAAEAAAABCAIAAACQd1PeAAAADElEQVR4nGP4z8AAAAMBAQDJ/pLvAAAAAElFTkSuQmCC"
)


@pytest.fixture
def message_chunk() -> Chunk:
    return Chunk(ChunkType.from_str('RuSt'), MESSAGE)


@pytest.fixture
def sample_file(tmp_path):
    path = tmp_path / 'sample.png'
    path.write_bytes(SAMPLE_PNG)
    return path
