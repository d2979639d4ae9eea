from dataclasses import dataclass, replace
from typing import Any, TypeVar

from . import helpers, settings

_SettingT = TypeVar('_SettingT', bound='_DefaultOverride')


@dataclass(frozen=True)
class _DefaultOverride(object):
    def __call__(self: _SettingT, **kwargs: Any) -> _SettingT:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class _ChunkPreset(settings._FileSetting, _DefaultOverride):

    # static pass through
    assert_tag = staticmethod(helpers.assert_tag)
    drop_offsets = staticmethod(helpers.drop_offsets)
    print_chunks = staticmethod(helpers.print_chunks)

    # isort: off
    from .resource import (
        read_chunks,
        write_chunks,
    )
    # isort: on


preset = _ChunkPreset()
