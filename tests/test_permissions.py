"""Tests for HumanPermissions and mode classification."""

import stat

import pytest

from humaniser import (
    FileType,
    HumanPermissions,
    InvalidInputError,
    ModeClassifier,
    PermissionBits,
    PermissionStyle,
    StatModeClassifier,
    Triplet,
)
from humaniser.formatters.permissions import render_descriptive, render_unix


class FakeClassifier(ModeClassifier):
    """Returns fixed bits and records the modes it was asked about."""

    def __init__(self, bits):
        self.bits = bits
        self.seen = []

    def classify(self, mode):
        self.seen.append(mode)
        return self.bits


def test_unix_directory():
    assert HumanPermissions(stat.S_IFDIR | 0o755).concise() == "drwxr-xr-x"


def test_unix_regular_file():
    assert HumanPermissions(stat.S_IFREG | 0o644).concise() == "-rw-r--r--"
    assert len(HumanPermissions(stat.S_IFREG | 0o644).concise()) == 10


def test_unix_symlink_and_specials():
    assert HumanPermissions(stat.S_IFLNK | 0o777).concise() == "lrwxrwxrwx"
    assert HumanPermissions(stat.S_IFIFO | 0o600).concise() == "prw-------"
    assert HumanPermissions(stat.S_IFSOCK | 0o755).concise()[0] == "s"


def test_unknown_type():
    assert HumanPermissions(0o700).concise() == "?rwx------"


def test_descriptive():
    assert HumanPermissions(stat.S_IFDIR | 0o755).full() == (
        "User: Read, Write, Execute; Group: Read, Execute; Other: Read, Execute"
    )


def test_descriptive_principal_without_bits():
    assert HumanPermissions(stat.S_IFREG | 0o640).full() == (
        "User: Read, Write; Group: Read; Other: None"
    )
    assert HumanPermissions(stat.S_IFREG).full() == "User: None; Group: None; Other: None"


def test_explicit_style():
    mode = stat.S_IFDIR | 0o755
    assert str(HumanPermissions(mode, style=PermissionStyle.UNIX)) == "drwxr-xr-x"
    assert str(HumanPermissions(mode, style="descriptive")).startswith("User: ")


def test_classifier_is_injected():
    bits = PermissionBits(
        file_type=FileType.SYMLINK,
        owner=Triplet(read=True, write=True, execute=True),
        group=Triplet(read=True),
        other=Triplet(),
    )
    fake = FakeClassifier(bits)
    permissions = HumanPermissions(0o123, classifier=fake)
    assert permissions.concise() == "lrwxr-----"
    assert permissions.full() == "User: Read, Write, Execute; Group: Read; Other: None"
    assert fake.seen == [0o123, 0o123]


def test_stat_classifier():
    bits = StatModeClassifier().classify(stat.S_IFCHR | 0o620)
    assert bits.file_type is FileType.CHARACTER_DEVICE
    assert bits.owner == Triplet(read=True, write=True, execute=False)
    assert bits.group == Triplet(read=False, write=True, execute=False)
    assert bits.other == Triplet()


def test_renderers_share_bits():
    bits = StatModeClassifier().classify(stat.S_IFBLK | 0o660)
    assert render_unix(bits) == "brw-rw----"
    assert render_descriptive(bits) == "User: Read, Write; Group: Read, Write; Other: None"


def test_special_bits_not_shown():
    assert HumanPermissions(0o41777).concise() == "drwxrwxrwx"
    assert HumanPermissions(0o104755).concise() == "-rwxr-xr-x"


@pytest.mark.parametrize("mode", [-1, "755", 7.5])
def test_invalid_mode_rejected(mode):
    with pytest.raises(InvalidInputError):
        HumanPermissions(mode)
