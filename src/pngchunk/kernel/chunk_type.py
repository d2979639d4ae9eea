from dataclasses import dataclass

import deal

from .buffer import BufferLike

TAG_SIZE = 4

CRITICAL_BYTE = 0
PUBLIC_BYTE = 1
RESERVED_BYTE = 2
SAFE_TO_COPY_BYTE = 3


class ChunkTypeError(ValueError):
    pass


class ChunkTypeLengthError(ChunkTypeError):
    def __init__(self, given: int) -> None:
        super().__init__(
            f'Expected {TAG_SIZE} bytes but received {given} when creating chunk type'
        )
        self.given = given


class InvalidCharacterError(ChunkTypeError):
    def __init__(self, text: str) -> None:
        super().__init__(f'Chunk type contains one or more invalid characters: {text!r}')
        self.text = text


class ChunkTypeDecodeError(ChunkTypeError):
    def __init__(self, raw: bytes) -> None:
        super().__init__(f'Chunk type is not valid text: {raw!r}')
        self.raw = raw


def is_upper(byte: int) -> bool:
    return ord('A') <= byte <= ord('Z')


def is_lower(byte: int) -> bool:
    return ord('a') <= byte <= ord('z')


def is_letter(byte: int) -> bool:
    return is_upper(byte) or is_lower(byte)


@dataclass(frozen=True)
class ChunkType(object):
    """4CC chunk type.

    Letter case of each byte encodes a property bit, uppercase meaning set:

        byte 0: critical (ancillary when clear)
        byte 1: public (private when clear)
        byte 2: reserved, must be set for a valid chunk type
        byte 3: unsafe to copy (safe to copy when clear)

    Construction from raw bytes does not check the bytes, use `is_valid`.
    """

    raw: bytes

    @deal.pre(lambda self: len(self.raw) == TAG_SIZE)
    def __post_init__(self) -> None:
        object.__setattr__(self, 'raw', bytes(self.raw))

    @classmethod
    def from_bytes(cls, raw: BufferLike) -> 'ChunkType':
        return cls(bytes(raw))

    @classmethod
    def from_str(cls, text: str) -> 'ChunkType':
        raw = text.encode('utf-8')
        if len(raw) != TAG_SIZE:
            raise ChunkTypeLengthError(len(raw))
        if not all(is_letter(byte) for byte in raw):
            raise InvalidCharacterError(text)
        return cls(raw)

    def is_critical(self) -> bool:
        return is_upper(self.raw[CRITICAL_BYTE])

    def is_public(self) -> bool:
        return is_upper(self.raw[PUBLIC_BYTE])

    def is_reserved_bit_valid(self) -> bool:
        return is_upper(self.raw[RESERVED_BYTE])

    def is_safe_to_copy(self) -> bool:
        return is_lower(self.raw[SAFE_TO_COPY_BYTE])

    def is_valid(self) -> bool:
        return all(is_letter(byte) for byte in self.raw) and self.is_reserved_bit_valid()

    def __bytes__(self) -> bytes:
        return self.raw

    def __str__(self) -> str:
        try:
            return self.raw.decode('ascii')
        except UnicodeDecodeError as exc:
            raise ChunkTypeDecodeError(self.raw) from exc

    def __repr__(self) -> str:
        return 'ChunkType<{tag}>'.format(tag=self.raw.decode('ascii', 'backslashreplace'))
