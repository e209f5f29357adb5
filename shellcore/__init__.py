# shellcore
#
# Alias table + substitution engine for the jsh command loop.

from shellcore.aliases import AliasTable, MAX_ALIAS_KEY_LENGTH, MAX_ALIAS_VAL_LENGTH
from shellcore.exceptions import AliasError, AllocationFailure, CommandError, NoSuchAlias

__all__ = [
    "AliasTable",
    "MAX_ALIAS_KEY_LENGTH",
    "MAX_ALIAS_VAL_LENGTH",
    "AliasError",
    "AllocationFailure",
    "CommandError",
    "NoSuchAlias",
]
