# humaniser/formatters/permissions.py
"""File permission formatting"""

from dataclasses import dataclass, field
from typing import Optional

from .base import HumanFormatter
from ..api.exceptions import InvalidInputError
from ..constants import (
    NO_PERMISSIONS,
    PLATFORM_PERMISSION_STYLE,
    PRINCIPAL_LABELS,
    OutputFormat,
    PermissionStyle,
)
from ..core.mode_classifier import ModeClassifier, StatModeClassifier
from ..models.permissions import PermissionBits

_default_classifier = StatModeClassifier()


def render_unix(bits: PermissionBits) -> str:
    """Render as the ten character ``ls -l`` string, e.g. ``drwxr-xr-x``

    Only the rwx triplets are shown. Setuid, setgid and sticky bits are not
    part of :class:`PermissionBits`, so ``0o41777`` renders ``drwxrwxrwx``
    where ``ls -l`` prints ``drwxrwxrwt``.
    """
    return bits.file_type.tag + "".join(triplet.symbolic() for triplet in bits.principals())


def render_descriptive(bits: PermissionBits) -> str:
    """Render one clause per principal

    ``User: Read, Write, Execute; Group: Read, Execute; Other: None``
    """
    clauses = []
    for label, triplet in zip(PRINCIPAL_LABELS, bits.principals()):
        granted = ", ".join(triplet.labels()) or NO_PERMISSIONS
        clauses.append(f"{label}: {granted}")
    return "; ".join(clauses)


_RENDERERS = {
    PermissionStyle.UNIX: render_unix,
    PermissionStyle.DESCRIPTIVE: render_descriptive,
}


@dataclass(frozen=True)
class HumanPermissions(HumanFormatter):
    """Format a raw file mode

    ``concise()`` always gives the Unix string and ``full()`` the descriptive
    sentence; ``str()`` uses ``style``, which defaults to the platform's.

    Examples:
        >>> HumanPermissions(0o40755).concise()
        'drwxr-xr-x'
        >>> HumanPermissions(0o100640).full()
        'User: Read, Write; Group: Read; Other: None'
    """

    mode: int
    classifier: ModeClassifier = field(default=_default_classifier, compare=False, repr=False)
    style: Optional[PermissionStyle] = None

    def __post_init__(self):
        if isinstance(self.mode, bool) or not isinstance(self.mode, int):
            raise InvalidInputError(f"Mode must be an integer: {self.mode!r}", self.mode)
        if self.mode < 0:
            raise InvalidInputError(f"Mode cannot be negative: {self.mode}", self.mode)
        if self.classifier is None:
            object.__setattr__(self, "classifier", _default_classifier)
        if self.style is not None:
            object.__setattr__(self, "style", PermissionStyle(self.style))

    @property
    def bits(self) -> PermissionBits:
        return self.classifier.classify(self.mode)

    def format(self, style: OutputFormat) -> str:
        if style == OutputFormat.CONCISE:
            return render_unix(self.bits)
        return render_descriptive(self.bits)

    def render_style(self, style: PermissionStyle) -> str:
        return _RENDERERS[PermissionStyle(style)](self.bits)

    def __str__(self) -> str:
        return self.render_style(self.style or PLATFORM_PERMISSION_STYLE)
