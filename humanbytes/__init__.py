"""
humanbytes: byte counts to human-readable sizes and back

Formats ``1048576`` as ``"1MB"`` and parses ``"1 MB"`` back to ``1048576``,
with small caches for the values seen most often.
"""

__version__ = "0.1.0"

from typing import Any, Dict, Optional, Union

from humanbytes.core.cache import CacheInfo
from humanbytes.core.converter import ByteConverter
from humanbytes.core.formatter import FormatOptions, OptionsLike
from humanbytes.core.parser import Number


class _ConverterProvider:
    _instance: Optional[ByteConverter] = None

    @classmethod
    def get(cls) -> ByteConverter:
        if cls._instance is None:
            cls._instance = ByteConverter()
        return cls._instance


def get_converter() -> ByteConverter:
    return _ConverterProvider.get()


def format(value: Any, options: OptionsLike = None) -> Optional[str]:
    return get_converter().format(value, options)


def parse(value: Any) -> Optional[Number]:
    return get_converter().parse(value)


def convert(value: Any, options: OptionsLike = None) -> Union[str, Number, None]:
    return get_converter().convert(value, options)


def cache_info() -> Dict[str, CacheInfo]:
    return get_converter().cache_info()


def clear_caches() -> None:
    get_converter().clear_caches()


__all__ = [
    "ByteConverter",
    "CacheInfo",
    "FormatOptions",
    "cache_info",
    "clear_caches",
    "convert",
    "format",
    "get_converter",
    "parse",
]
