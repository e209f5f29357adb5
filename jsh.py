# jsh.py
import argparse
import logging
import readline

from shellcore.core import init_core


class Completer:
    """Completes the first word of a line from built-ins + alias keys."""

    def __init__(self, core):
        self.core = core
        self._alias_keys = []
        self._matches = []

    def refresh(self):
        # only re-read keys when alias/unalias touched the table
        keys = self.core.aliases.snapshot_keys(reset_on_change=True)
        if keys is not None:
            self._alias_keys = keys

    def candidates(self, text):
        self.refresh()
        words = set(self.core.command_names()) | set(self._alias_keys)
        return sorted(w for w in words if w.startswith(text))

    def complete(self, text, state):
        if state == 0:
            before = readline.get_line_buffer()[:readline.get_begidx()]
            self._matches = self.candidates(text) if not before.strip() else []
        if state < len(self._matches):
            return self._matches[state]
        return None


def parse_args(argv=None):
    p = argparse.ArgumentParser(description="jsh: a small shell with alias substitution")
    p.add_argument("-c", dest="command", metavar="LINE", help="run one line and exit")
    p.add_argument("--config", default=None, help="config file (default: config/core.json)")
    p.add_argument("--debug", action="store_true", help="log every alias decision")
    return p.parse_args(argv)


def main(argv=None):
    args = parse_args(argv)
    core = init_core(args.config)

    logging.basicConfig(
        level=logging.DEBUG if (args.debug or core.debug) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )

    if args.command is not None:
        res = core.execute(args.command)
        if res:
            print(res)
        return core.status

    completer = Completer(core)
    readline.set_completer(completer.complete)
    readline.parse_and_bind("tab: complete")

    print("jsh (alias substitution shell)")
    print("Commands: help, alias, unalias, echo, history.")
    print("Exit: quit/exit\n")

    while True:
        try:
            line = input(core.prompt)
        except (EOFError, KeyboardInterrupt):
            print()
            break
        if line.strip() in ("quit", "exit"):
            break
        res = core.execute(line)
        if res:
            print(res)
    return core.status


if __name__ == "__main__":
    raise SystemExit(main())
