"""
Byte converter for humanbytes.

Ties a formatter and a parser together, each with its own cache, and
dispatches values to the right direction.
"""

import logging
from typing import TYPE_CHECKING, Any, Dict, Optional, Union

from humanbytes.core.cache import DEFAULT_MAX_ENTRIES, CacheInfo
from humanbytes.core.formatter import Formatter, OptionsLike
from humanbytes.core.parser import Number, Parser
from humanbytes.utils.numeric import is_number

if TYPE_CHECKING:
    from humanbytes.utils.config import Config

logger = logging.getLogger("humanbytes.converter")


class ByteConverter:
    def __init__(self, max_entries: int = DEFAULT_MAX_ENTRIES):
        self.formatter = Formatter(max_entries=max_entries)
        self.parser = Parser(max_entries=max_entries)
        logger.debug(f"Created converter with cache capacity {max_entries}")

    @classmethod
    def from_config(cls, config: "Config") -> "ByteConverter":
        return cls(max_entries=config.get_cache_size())

    def format(self, value: Any, options: OptionsLike = None) -> Optional[str]:
        return self.formatter.format(value, options)

    def parse(self, value: Any) -> Optional[Number]:
        return self.parser.parse(value)

    def convert(self, value: Any, options: OptionsLike = None) -> Union[str, Number, None]:
        """Parse strings, format numbers, and return None for anything else."""
        if isinstance(value, str):
            return self.parse(value)
        if is_number(value):
            return self.format(value, options)
        return None

    def cache_info(self) -> Dict[str, CacheInfo]:
        return {"format": self.formatter.cache.info(), "parse": self.parser.cache.info()}

    def clear_caches(self) -> None:
        self.formatter.cache.clear()
        self.parser.cache.clear()
