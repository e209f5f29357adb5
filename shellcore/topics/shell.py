# shellcore/topics/shell.py
#
# Small built-ins that make alias expansion observable from the prompt.

from shellcore.exceptions import CommandError


def echo(core, *words):
    return " ".join(words)


def history(core, n=None):
    numbered = list(enumerate((rec["in"] for rec in core.log if "in" in rec), 1))
    if n is not None:
        try:
            count = int(n)
        except ValueError:
            raise CommandError(f"history: numeric argument required: {n}")
        numbered = numbered[-count:] if count > 0 else []
    return "\n".join(f"{i:5d}  {line}" for i, line in numbered)


def help_cmd(core, name=None):
    if name:
        entry = core.commands.get(name)
        if entry is not None:
            return (
                "Command: " + name + "\n"
                "Usage:   " + entry["usage"] + "\n"
                "Help:    " + entry["help"]
            )
        value = core.aliases.get(name)
        if value is not None:
            return (
                "Command: " + name + "\n"
                "Type:    alias\n"
                "Expands: " + value
            )
        return "No such command or alias: " + name

    lines = []
    lines.append("jsh built-in commands")
    lines.append("----------------------------------------")
    for cmd in core.command_names():
        lines.append(f"  {core.commands[cmd]['usage']:<32} {core.commands[cmd]['help']}")
    lines.append("")
    lines.append("Aliases expand in command position (start of line or after ;).")
    lines.append("Only ; separates commands; unquoted | & ( ) are refused.")
    lines.append("Prefix a key with '\\' to keep it literal, e.g. \\ls or \\~")
    return "\n".join(lines)


COMMANDS = {
    "echo":    (echo,     "Print words after alias resolution", "echo <words...>"),
    "history": (history,  "Show lines entered this session",    "history [n]"),
    "help":    (help_cmd, "Show built-ins, or one command/alias", "help [name]"),
}
