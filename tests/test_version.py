from chnative import version
from chnative.version import library_version, version_string


def test_version_string_matches_components():
    assert version_string() == "2.5.1"


def test_packed_version_decodes_to_components():
    packed = library_version()
    assert packed // 1_000_000 == version.VERSION_MAJOR
    assert packed // 10_000 % 100 == version.VERSION_MINOR
    assert packed // 100 % 100 == version.VERSION_PATCH
    assert packed % 100 == version.VERSION_BUILD


def test_packed_version_agrees_with_string():
    major, minor, patch = (int(part) for part in version_string().split("."))
    packed = library_version()
    assert (packed // 1_000_000, packed // 10_000 % 100, packed // 100 % 100) == (
        major,
        minor,
        patch,
    )