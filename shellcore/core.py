"""shellcore/core.py

Core runtime + init_core() wiring.

Every line goes: alias resolution -> tokenizing -> built-in dispatch.
The Core owns the session's AliasTable and is the only thing that touches it,
serialized by exec_lock.
"""

from __future__ import annotations

import json
import logging
import threading
from pathlib import Path

from shellcore.aliases import AliasTable
from shellcore.exceptions import CommandError
from shellcore.lib.grammar import split_commands

logger = logging.getLogger(__name__)

CONFIG_PATH = Path("config/core.json")
DEFAULT_PROMPT = "jsh> "
HOME_ALIAS_KEY = "~"

EXIT_SUCCESS = 0
EXIT_FAILURE = 1


class Core:
    def __init__(self, aliases: AliasTable | None = None):
        self.aliases = aliases if aliases is not None else AliasTable()
        self.commands = {}   # cmd -> {handler, help, usage}
        self.log = []
        self.status = EXIT_SUCCESS
        self.prompt = DEFAULT_PROMPT
        self.debug = False

        # one command loop; background callers must go through execute()
        self.exec_lock = threading.RLock()

    def register(self, name, handler, help_text="", usage=""):
        self.commands[name] = {"handler": handler, "help": help_text, "usage": usage}

    def command_names(self):
        return sorted(self.commands.keys())

    def _run(self, parts):
        cmd, *args = parts
        entry = self.commands.get(cmd)
        if not entry:
            self.status = EXIT_FAILURE
            return f"Unknown command: {cmd}"

        logger.debug("dispatch %s %r", cmd, args)
        try:
            out = entry["handler"](self, *args)
            self.status = EXIT_SUCCESS
        except CommandError as e:
            out = str(e)
            self.status = EXIT_FAILURE
        except Exception as e:
            out = f"Error: {e}"
            self.status = EXIT_FAILURE
        return out

    def execute(self, raw):
        with self.exec_lock:
            self.log.append({"in": raw})
            if not raw.strip():
                return None

            try:
                line = self.aliases.resolve(raw)
                commands = split_commands(line)
            except CommandError as e:
                out = str(e)
                self.status = EXIT_FAILURE
                self.log.append({"out": out})
                return out
            except Exception as e:
                out = f"Error: {e}"
                self.status = EXIT_FAILURE
                self.log.append({"out": out})
                return out
            self.log.append({"resolved": line})

            outs = []
            for parts in commands:
                out = self._run(parts)
                if out:
                    outs.append(str(out))

            out = "\n".join(outs) if outs else None
            self.log.append({"out": out})
            return out


def _load_core_config(path: Path) -> dict:
    if not path.exists():
        return {}
    try:
        cfg = json.loads(path.read_text(encoding="utf-8"))
    except Exception as e:
        logger.warning("ignoring unreadable config %s: %s", path, e)
        return {}
    return cfg if isinstance(cfg, dict) else {}


def init_core(config_path: str | Path | None = None) -> Core:
    # Late import to keep topics free to import from shellcore.*
    from shellcore.topics import ALL_COMMANDS

    core = Core()
    cfg = _load_core_config(Path(config_path) if config_path is not None else CONFIG_PATH)

    core.prompt = str(cfg.get("prompt", DEFAULT_PROMPT))
    core.debug = bool(cfg.get("debug", False))

    # register built-ins
    for name, (handler, help_text, usage) in ALL_COMMANDS.items():
        core.register(name, handler, help_text, usage)

    # built-in '~' alias: valid in any position, escape with '\~'
    if cfg.get("home_alias", True):
        core.aliases.define(HOME_ALIAS_KEY, str(Path.home()))

    # user aliases, in file order (so later ones can build on earlier ones)
    user_aliases = cfg.get("aliases") or {}
    if isinstance(user_aliases, dict):
        for key, value in user_aliases.items():
            try:
                core.aliases.define(str(key), str(value))
            except ValueError as e:
                logger.warning("skipping alias %r from config: %s", key, e)

    return core
