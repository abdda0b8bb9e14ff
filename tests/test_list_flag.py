import pytest

from crossflags.errors import FlagAlreadySetError, MalformedEnvEntryError
from crossflags.list_flag import (
    ListFlagValue,
    env_flag,
    tags_flag,
    target_arch_flag,
    validate_env_entry,
)


def test_env_flag_accepts_key_value_pairs():
    flag = env_flag()
    flag.set("a=1,b=2")
    assert flag.values == ["a=1", "b=2"]


def test_env_flag_accepts_empty_value():
    flag = env_flag()
    flag.set("FOO=")
    assert flag.values == ["FOO="]


def test_env_flag_rejects_entry_without_separator():
    flag = env_flag()
    try:
        flag.set("a=1,b")
    except MalformedEnvEntryError as exc:
        assert "KEY=VALUE or KEY=" in str(exc)
        assert exc.entry == "b"
    else:
        raise AssertionError("expected MalformedEnvEntryError to be raised")


def test_env_flag_rejects_entry_with_two_separators():
    with pytest.raises(MalformedEnvEntryError):
        env_flag().set("FOO=BAR=BAZ")


def test_env_flag_failed_set_keeps_previous_value():
    flag = env_flag()
    flag.set("KEEP=1")

    with pytest.raises(MalformedEnvEntryError):
        flag.set("a=1,b")

    assert flag.values == ["KEEP=1"]


def test_env_flag_does_not_trim_pieces():
    flag = env_flag()
    flag.set(" A=1 , B=2")
    assert flag.values == [" A=1 ", " B=2"]

    try:
        env_flag().set(" foo , bar ")
    except MalformedEnvEntryError as exc:
        assert exc.entry == " foo "
    else:
        raise AssertionError("expected MalformedEnvEntryError to be raised")


def test_empty_raw_string_yields_single_empty_element():
    flag = tags_flag()
    flag.set("")
    assert flag.values == [""]


def test_trailing_comma_yields_trailing_empty_element():
    flag = tags_flag()
    flag.set("a,b,")
    assert flag.values == ["a", "b", ""]


@pytest.mark.parametrize("factory", [tags_flag, target_arch_flag])
def test_trimmed_variants_strip_whitespace(factory):
    flag = factory()
    flag.set(" foo , bar ")
    assert flag.values == ["foo", "bar"]


def test_order_and_duplicates_are_preserved():
    flag = target_arch_flag()
    flag.set("arm64,amd64,arm64")
    assert flag.values == ["arm64", "amd64", "arm64"]


def test_single_element_value_can_be_set_again():
    flag = tags_flag()
    flag.set("one")
    flag.set("two")
    assert flag.values == ["two"]


def test_multi_element_value_cannot_be_set_again():
    flag = tags_flag()
    flag.set("one,two")

    try:
        flag.set("three")
    except FlagAlreadySetError as exc:
        assert str(exc) == "flag already set"
    else:
        raise AssertionError("expected FlagAlreadySetError to be raised")

    assert flag.values == ["one", "two"]


def test_arch_flag_default_can_be_replaced_once():
    flag = target_arch_flag(default=["amd64"])
    assert flag.values == ["amd64"]
    flag.set("arm64")
    assert flag.values == ["arm64"]


def test_string_renders_every_entry_in_order():
    flag = env_flag()
    flag.set("B=2,A=1")
    rendered = flag.string()

    assert rendered == str(flag)
    assert rendered.index("B=2") < rendered.index("A=1")


def test_empty_value_renders_as_empty_list():
    assert str(env_flag()) == "[]"


def test_values_returns_a_copy():
    flag = tags_flag()
    flag.set("a")
    flag.values.append("b")
    assert flag.values == ["a"]


def test_list_flag_compares_with_plain_lists():
    flag = ListFlagValue("custom", normalize=str.upper)
    flag.set("a,b")
    assert flag == ["A", "B"]
    assert list(flag) == ["A", "B"]
    assert len(flag) == 2


def test_validate_env_entry_accepts_plain_assignment():
    validate_env_entry("KEY=VALUE")
