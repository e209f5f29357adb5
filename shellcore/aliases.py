# shellcore/aliases.py
#
# Alias table: key -> value, insertion ordered, keys unique.
#
# Values are run through the substitution engine at definition time, so
#   alias a b
#   alias c a        -> stores c = 'b'
# Redefining a key drops the old entry and appends the new one at the tail.
#
# Over-long keys/values are silently truncated (50 / 200 chars).
# No locking here: the Core's command loop is the only writer.

from __future__ import annotations

from typing import Dict, List, Optional, Tuple

from shellcore.exceptions import AllocationFailure, NoSuchAlias
from shellcore.lib.grammar import is_command_position
from shellcore.lib.substitute import Validator, resolve

MAX_ALIAS_KEY_LENGTH = 50
MAX_ALIAS_VAL_LENGTH = 200


class AliasTable:
    def __init__(self, is_valid: Validator = is_command_position):
        self.is_valid = is_valid
        self._entries: Dict[str, str] = {}
        self._total_value_length = 0
        self._changed = False

    def __len__(self) -> int:
        return len(self._entries)

    def __contains__(self, key: str) -> bool:
        return self.exists(key)

    @property
    def total_value_length(self) -> int:
        return self._total_value_length

    @property
    def changed(self) -> bool:
        return self._changed

    def resolve(self, text: str) -> str:
        try:
            return resolve(text, list(self._entries.items()), self.is_valid)
        except MemoryError as e:
            raise AllocationFailure("alias: out of memory while resolving") from e

    def define(self, key: str, value: str) -> None:
        key = key[:MAX_ALIAS_KEY_LENGTH]
        if not key:
            raise ValueError("alias key must not be empty")

        # build the new mapping aside; the table is only swapped in at the end
        val = self.resolve(value)[:MAX_ALIAS_VAL_LENGTH]
        old = self._entries.get(key)
        try:
            entries = {k: v for k, v in self._entries.items() if k != key}
            entries[key] = val
        except MemoryError as e:
            raise AllocationFailure(f"alias: out of memory while defining '{key}'") from e

        self._entries = entries
        self._total_value_length += len(val) - (len(old) if old is not None else 0)
        self._changed = True

    def remove(self, key: str) -> None:
        key = key[:MAX_ALIAS_KEY_LENGTH]
        if key not in self._entries:
            raise NoSuchAlias(key)
        self._unlink(key)
        self._changed = True

    def clear(self) -> None:
        if self._entries:
            self._changed = True
        self._entries = {}
        self._total_value_length = 0

    def _unlink(self, key: str) -> None:
        self._total_value_length -= len(self._entries.pop(key))

    def list(self) -> List[Tuple[str, str]]:
        return list(self._entries.items())

    def get(self, key: str) -> Optional[str]:
        return self._entries.get(key)

    def exists(self, key: str) -> bool:
        return key in self._entries

    def snapshot_keys(self, reset_on_change: bool = False) -> Optional[List[str]]:
        """Copy of all keys; None if reset_on_change and nothing changed since last read."""
        if reset_on_change and not self._changed:
            return None
        keys = list(self._entries.keys())
        self._changed = False
        return keys


def format_alias(key: str, value: str) -> str:
    return f"alias {key} = '{value}'"
