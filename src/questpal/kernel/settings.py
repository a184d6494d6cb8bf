import logging
from dataclasses import dataclass, replace
from typing import Any, TypeVar

_SettingT = TypeVar('_SettingT', bound='_DefaultOverride')


@dataclass(frozen=True)
class _DefaultOverride(object):
    def __call__(self: _SettingT, **kwargs: Any) -> _SettingT:
        return replace(self, **kwargs)


@dataclass(frozen=True)
class _DecodeSetting(_DefaultOverride):
    """Setting for decoding palette sections

    check_size: bool (default True) -
        compare declared section length with consumed bytes and log a warning on mismatch

    logger: destination for warnings and branch traces
    """

    check_size: bool = True
    logger: logging.Logger = logging.root


preset = _DecodeSetting()
