"""Permission bit models"""

from dataclasses import dataclass
from enum import Enum
from typing import List, Tuple

from ..constants import PERMISSION_CHARS, PERMISSION_LABELS


class FileType(Enum):
    """File type with its ``ls -l`` tag"""
    DIRECTORY = "d"
    REGULAR = "-"
    SYMLINK = "l"
    CHARACTER_DEVICE = "c"
    BLOCK_DEVICE = "b"
    FIFO = "p"
    SOCKET = "s"
    UNKNOWN = "?"

    @property
    def tag(self) -> str:
        return self.value


@dataclass(frozen=True)
class Triplet:
    """Read/write/execute flags for one principal"""

    read: bool = False
    write: bool = False
    execute: bool = False

    def flags(self) -> Tuple[bool, bool, bool]:
        return (self.read, self.write, self.execute)

    def symbolic(self) -> str:
        """Render as ``rwx`` with ``-`` for unset bits"""
        return "".join(
            char if flag else "-"
            for char, flag in zip(PERMISSION_CHARS, self.flags())
        )

    def labels(self) -> List[str]:
        """Names of the permissions that are set"""
        return [label for label, flag in zip(PERMISSION_LABELS, self.flags()) if flag]


@dataclass(frozen=True)
class PermissionBits:
    """File type plus owner, group and other triplets"""

    file_type: FileType
    owner: Triplet
    group: Triplet
    other: Triplet

    def principals(self) -> Tuple[Triplet, Triplet, Triplet]:
        return (self.owner, self.group, self.other)
