import pytest

from shellcore import aliases as aliases_mod
from shellcore.aliases import (
    MAX_ALIAS_KEY_LENGTH,
    MAX_ALIAS_VAL_LENGTH,
    AliasTable,
    format_alias,
)
from shellcore.exceptions import AllocationFailure, NoSuchAlias


def test_redefine_keeps_one_entry(table: AliasTable) -> None:
    table.define("ll", "ls -l")
    table.define("ll", "ls -la")
    assert len(table) == 1
    assert table.get("ll") == "ls -la"
    assert table.total_value_length == len("ls -la")


def test_redefine_moves_entry_to_tail(table: AliasTable) -> None:
    table.define("a", "1")
    table.define("b", "2")
    table.define("a", "3")
    assert table.list() == [("b", "2"), ("a", "3")]


def test_total_value_length_tracks_defines_and_removes(table: AliasTable) -> None:
    ops = [
        ("define", "x", "xxxx"),
        ("define", "y", "yy"),
        ("define", "x", "q"),
        ("remove", "y", None),
        ("define", "z", "z" * 300),
        ("define", "w", ""),
    ]
    for op, key, value in ops:
        if op == "define":
            table.define(key, value)
        else:
            table.remove(key)
        assert table.total_value_length == sum(len(v) for _, v in table.list())
    assert table.total_value_length == 1 + MAX_ALIAS_VAL_LENGTH


def test_snapshot_keys_reports_changes_once(table: AliasTable) -> None:
    assert table.snapshot_keys(reset_on_change=True) is None

    table.define("a", "1")
    table.define("b", "2")
    assert table.snapshot_keys(reset_on_change=True) == ["a", "b"]
    assert table.snapshot_keys(reset_on_change=True) is None

    table.remove("a")
    assert table.snapshot_keys(reset_on_change=True) == ["b"]
    assert table.snapshot_keys(reset_on_change=True) is None


def test_snapshot_keys_without_reset_always_returns(table: AliasTable) -> None:
    table.define("a", "1")
    assert table.snapshot_keys() == ["a"]
    assert table.snapshot_keys() == ["a"]
    assert not table.changed


def test_snapshot_keys_is_a_copy(table: AliasTable) -> None:
    table.define("a", "1")
    keys = table.snapshot_keys()
    keys.append("b")
    assert table.snapshot_keys() == ["a"]


def test_value_resolved_at_definition_time(table: AliasTable) -> None:
    table.define("a", "b")
    table.define("c", "a")
    assert table.get("c") == "b"

    # redefining 'a' later does not touch 'c'
    table.define("a", "zzz")
    assert table.get("c") == "b"


def test_self_referencing_redefinition_captures_old_value(table: AliasTable) -> None:
    table.define("ls", "ls --color")
    table.define("ls", "ls -F")
    assert table.get("ls") == "ls --color -F"


def test_truncation(table: AliasTable) -> None:
    key = "k" * 60
    table.define(key, "v" * 250)
    stored_key, stored_value = table.list()[0]
    assert stored_key == "k" * MAX_ALIAS_KEY_LENGTH
    assert stored_value == "v" * MAX_ALIAS_VAL_LENGTH
    assert table.total_value_length == 200

    # over-long keys collapse onto the same entry
    table.define("k" * 55, "w")
    assert len(table) == 1
    table.remove("k" * 70)
    assert len(table) == 0


def test_remove_missing_key(table: AliasTable) -> None:
    table.define("a", "12345")
    table.snapshot_keys(reset_on_change=True)

    with pytest.raises(NoSuchAlias) as excinfo:
        table.remove("nope")
    assert excinfo.value.key == "nope"
    assert table.list() == [("a", "12345")]
    assert table.total_value_length == 5
    assert table.snapshot_keys(reset_on_change=True) is None


def test_exists_is_exact(table: AliasTable) -> None:
    table.define("ll", "ls -l")
    assert table.exists("ll")
    assert "ll" in table
    assert not table.exists("l")
    assert not table.exists("lll")


def test_empty_key_rejected(table: AliasTable) -> None:
    with pytest.raises(ValueError):
        table.define("", "x")
    assert len(table) == 0
    assert not table.changed


def test_allocation_failure_leaves_table_untouched(table: AliasTable, monkeypatch) -> None:
    table.define("a", "1")
    table.snapshot_keys(reset_on_change=True)

    def boom(*args, **kwargs):
        raise MemoryError()

    monkeypatch.setattr(aliases_mod, "resolve", boom)
    with pytest.raises(AllocationFailure):
        table.define("a", "2")
    assert table.list() == [("a", "1")]
    assert table.total_value_length == 1
    assert not table.changed


def test_clear(table: AliasTable) -> None:
    table.define("a", "1")
    table.define("b", "22")
    table.snapshot_keys(reset_on_change=True)
    table.clear()
    assert len(table) == 0
    assert table.total_value_length == 0
    assert table.snapshot_keys(reset_on_change=True) == []


def test_resolve_uses_table_predicate() -> None:
    table = AliasTable(is_valid=lambda key, context, offset: False)
    table.define("ls", "ls --color")
    assert table.resolve("ls \\ls") == "ls ls"


def test_format_alias() -> None:
    assert format_alias("ll", "ls -l") == "alias ll = 'ls -l'"
