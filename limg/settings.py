from __future__ import annotations

import sys
from dataclasses import dataclass
from typing import FrozenSet, Optional

MAGIC = b"LIMG"
FORMAT_VERSION = 1
TRANSPARENT_FORMAT_VERSION = 2
SUPPORTED_VERSIONS: FrozenSet[int] = frozenset({FORMAT_VERSION, TRANSPARENT_FORMAT_VERSION})
MAX_DIMENSION = 0xFFFFFFFF
DEFAULT_MAX_DATA_SIZE = sys.maxsize
DEFAULT_STRICT_TRAILING = False
READ_CHUNK_SIZE = 1 << 16


@dataclass
class CodecSettings:
    strict_trailing: bool = DEFAULT_STRICT_TRAILING
    max_data_size: int = DEFAULT_MAX_DATA_SIZE
    # Narrows SUPPORTED_VERSIONS; versions limg cannot parse stay rejected.
    supported_versions: Optional[FrozenSet[int]] = None

    def accepts_version(self, version: int) -> bool:
        if version not in SUPPORTED_VERSIONS:
            return False
        if self.supported_versions is not None:
            return version in self.supported_versions
        return True


def resolve_settings(settings: Optional[CodecSettings]) -> CodecSettings:
    return settings or CodecSettings()
