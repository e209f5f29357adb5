# shellcore/topics/aliascmds.py
#
# alias / unalias built-ins. Thin wrappers over core.aliases (AliasTable).
#
#   alias                  list all, one 'alias <key> = '<value>'' per line
#   alias <key>            show one
#   alias <key> <value...> define (value words joined by single spaces)
#   unalias <key...>       remove
#   unalias -a             remove all

from shellcore.aliases import format_alias
from shellcore.exceptions import CommandError, NoSuchAlias


def alias(core, key=None, *value_parts):
    table = core.aliases
    if key is None:
        return "\n".join(format_alias(k, v) for k, v in table.list())

    if not value_parts:
        value = table.get(key)
        if value is None:
            raise CommandError(f"alias: no such alias key: {key}")
        return format_alias(key, value)

    table.define(key, " ".join(value_parts))
    return None


def unalias(core, *keys):
    if not keys:
        raise CommandError("usage: unalias <key...> | unalias -a")

    if keys == ("-a",):
        core.aliases.clear()
        return None

    errors = []
    for key in keys:
        try:
            core.aliases.remove(key)
        except NoSuchAlias:
            errors.append(f"unalias: no such alias key: {key}")
    if errors:
        raise CommandError("\n".join(errors))
    return None


COMMANDS = {
    "alias":   (alias,   "Define, show or list aliases", "alias [<key> [<value...>]]"),
    "unalias": (unalias, "Remove aliases",               "unalias <key...> | unalias -a"),
}
