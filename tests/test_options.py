import dataclasses

import pytest

from starsyn.options import FileOptions

FLAG_NAMES = [
    "allow_set",
    "allow_while",
    "top_level_control",
    "global_reassign",
    "load_binds_globally",
    "recursion",
]


def test_default_has_every_flag_off():
    opts = FileOptions()
    assert [getattr(opts, name) for name in FLAG_NAMES] == [False] * len(FLAG_NAMES)


def test_fields_are_exactly_the_documented_flags():
    values = dataclasses.asdict(FileOptions())
    assert list(values) == FLAG_NAMES
    assert list(values.values()) == [False] * len(FLAG_NAMES)


@pytest.mark.parametrize("name", FLAG_NAMES)
def test_setting_one_flag_leaves_the_others_off(name):
    opts = FileOptions(**{name: True})
    assert getattr(opts, name) is True
    others = [getattr(opts, other) for other in FLAG_NAMES if other != name]
    assert not any(others)


def test_equality_depends_on_values():
    assert FileOptions(recursion=True) == FileOptions(recursion=True)
    assert FileOptions(recursion=True) != FileOptions()


def test_options_are_immutable():
    opts = FileOptions()
    with pytest.raises(dataclasses.FrozenInstanceError):
        opts.allow_set = True  # type: ignore[misc]
    assert opts.allow_set is False
    assert opts == FileOptions()


def test_replace_produces_modified_copy():
    base = FileOptions(allow_while=True)
    changed = dataclasses.replace(base, global_reassign=True)
    assert changed.allow_while is True
    assert changed.global_reassign is True
    assert base.global_reassign is False