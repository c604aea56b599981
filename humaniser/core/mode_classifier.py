# humaniser/core/mode_classifier.py
"""Classification of raw file modes into permission bits"""

import stat
from abc import ABC, abstractmethod

from ..models.permissions import FileType, PermissionBits, Triplet


class ModeClassifier(ABC):
    """Abstract base class for mode classifiers"""

    @abstractmethod
    def classify(self, mode: int) -> PermissionBits:
        """
        Split a raw mode into file type and permission triplets

        Args:
            mode: Raw ``st_mode`` value

        Returns:
            PermissionBits for the mode
        """
        pass


class StatModeClassifier(ModeClassifier):
    """Classifier built on the POSIX layout exposed by :mod:`stat`"""

    _TYPE_CHECKS = [
        (stat.S_ISDIR, FileType.DIRECTORY),
        (stat.S_ISREG, FileType.REGULAR),
        (stat.S_ISLNK, FileType.SYMLINK),
        (stat.S_ISCHR, FileType.CHARACTER_DEVICE),
        (stat.S_ISBLK, FileType.BLOCK_DEVICE),
        (stat.S_ISFIFO, FileType.FIFO),
        (stat.S_ISSOCK, FileType.SOCKET),
    ]

    _PRINCIPAL_BITS = [
        (stat.S_IRUSR, stat.S_IWUSR, stat.S_IXUSR),
        (stat.S_IRGRP, stat.S_IWGRP, stat.S_IXGRP),
        (stat.S_IROTH, stat.S_IWOTH, stat.S_IXOTH),
    ]

    def classify(self, mode: int) -> PermissionBits:
        owner, group, other = (
            Triplet(read=bool(mode & r), write=bool(mode & w), execute=bool(mode & x))
            for r, w, x in self._PRINCIPAL_BITS
        )
        return PermissionBits(
            file_type=self.file_type(mode),
            owner=owner,
            group=group,
            other=other,
        )

    def file_type(self, mode: int) -> FileType:
        """Map the format bits of a mode to a FileType"""
        for check, file_type in self._TYPE_CHECKS:
            if check(mode):
                return file_type
        return FileType.UNKNOWN
