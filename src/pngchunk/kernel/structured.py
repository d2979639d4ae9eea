import struct
from dataclasses import dataclass
from typing import Callable, Generic, Sequence, TypeVar, cast

from .buffer import BufferLike, splice

T_Struct = TypeVar('T_Struct')


@dataclass(frozen=True)
class StructuredTuple(Generic[T_Struct]):
    """Fixed-size record packed with `struct`, exposed as a named tuple.

    _fields: names of the tuple fields, in packing order

    _structure: struct layout for the fields

    _factory: tuple type built from unpacked values
    """

    _fields: Sequence[str]
    _structure: struct.Struct
    _factory: Callable[..., T_Struct]

    @property
    def size(self) -> int:
        return self._structure.size

    def unpack_from(self, buffer: BufferLike, offset: int = 0) -> T_Struct:
        factory = cast(Callable[..., T_Struct], self._factory)
        values = self._structure.unpack(splice(buffer, offset, self.size))
        return factory(**dict(zip(self._fields, values)))

    def pack(self, data: T_Struct) -> bytes:
        return self._structure.pack(*[getattr(data, field) for field in self._fields])
