# shellcore/lib/substitute.py
#
# Alias substitution engine (no Core dependency).
#
# resolve() runs one whole-line pass per alias, in table order:
#   - find the next literal occurrence of the key in the CURRENT line
#   - '\' right before it    -> strip the '\', keep the key, skip past it
#   - key starting with '~'  -> always expanded (built-in)
#   - else ask is_valid(key, line, offset)
#       valid   -> splice value in, resume AFTER the value
#       invalid -> resume after the key
#
# Later aliases see the text produced by earlier ones. This is what makes
# definition-time pre-resolution work, and also means a later key can match
# inside an earlier alias's value at use time. Known, not fixed.

from __future__ import annotations

import logging
from typing import Callable, Iterable, Tuple

logger = logging.getLogger(__name__)

ESCAPE_CHAR = "\\"
BUILTIN_PREFIX = "~"

Validator = Callable[[str, str, int], bool]


def is_escaped(context: str, offset: int) -> bool:
    return offset > 0 and context[offset - 1] == ESCAPE_CHAR


def strip_escape(context: str, offset: int) -> str:
    """Return context with the escape char in front of offset removed."""
    return context[:offset - 1] + context[offset:]


def splice(context: str, offset: int, length: int, text: str) -> str:
    return context[:offset] + text + context[offset + length:]


def is_builtin(key: str) -> bool:
    return key.startswith(BUILTIN_PREFIX)


def resolve(text: str, entries: Iterable[Tuple[str, str]], is_valid: Validator) -> str:
    out = text
    for key, value in entries:
        if not key:
            continue
        start = 0
        while True:
            i = out.find(key, start)
            if i < 0:
                break

            if is_escaped(out, i):
                logger.debug("alias: escaping '%s'", key)
                out = strip_escape(out, i)
                start = i - 1 + len(key)
                continue

            if is_builtin(key) or is_valid(key, out, i):
                logger.debug("alias: '%s' VALID in context '%s'", key, out[i:])
                out = splice(out, i, len(key), value)
                start = i + len(value)
            else:
                logger.debug("alias: '%s' INVALID in context '%s'", key, out[i:])
                start = i + len(key)

    logger.debug("alias: input resolved to: '%s'", out)
    return out
