# shellcore/lib/grammar.py
#
# Command-position check used to decide whether an alias match gets expanded.
# Pure functions (no Core dependency, no buffer mutation).
#
# A match is in command position when:
#   - everything before it (trailing blanks skipped) is empty, or ends in a
#     separator:  |  ;  &  (  newline      (covers && and || as well)
#   - the character right after it ends the word:
#     end of line, blank, or one of  |  ;  &  )  newline

import shlex
from typing import List

from shellcore.exceptions import CommandError

BLANKS = " \t"
CMD_SEPARATORS = "|;&(\n"
WORD_TERMINATORS = " \t|;&)\n"

# only ";" sequences dispatched commands; these are refused outside quotes
UNSUPPORTED_OPERATORS = "|&()"


def starts_command(context: str, offset: int) -> bool:
    i = offset
    while i > 0 and context[i - 1] in BLANKS:
        i -= 1
    return i == 0 or context[i - 1] in CMD_SEPARATORS


def ends_word(context: str, end: int) -> bool:
    return end >= len(context) or context[end] in WORD_TERMINATORS


def is_command_position(key: str, context: str, offset: int) -> bool:
    if offset < 0 or context[offset:offset + len(key)] != key:
        return False
    return starts_command(context, offset) and ends_word(context, offset + len(key))


def split_unquoted(line: str) -> List[str]:
    """Cut line at ';' outside quotes/escapes; quoting is left for shlex."""
    segments: List[str] = []
    cur: List[str] = []
    quote = None
    escaped = False
    for ch in line:
        if escaped:
            escaped = False
        elif quote:
            if ch == quote:
                quote = None
            elif ch == "\\" and quote == '"':
                escaped = True
        elif ch == "\\":
            escaped = True
        elif ch in "'\"":
            quote = ch
        elif ch == ";":
            segments.append("".join(cur))
            cur = []
            continue
        elif ch in UNSUPPORTED_OPERATORS:
            raise CommandError(f"jsh: unsupported operator: {ch}")
        cur.append(ch)
    segments.append("".join(cur))
    return segments


def split_commands(line: str) -> List[List[str]]:
    """Tokenize a resolved line into ';'-separated word lists (quotes honoured)."""
    commands = [shlex.split(segment) for segment in split_unquoted(line)]
    return [parts for parts in commands if parts]
