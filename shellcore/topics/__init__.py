# shellcore/topics
#
# Built-in command surface: name -> (handler, help, usage).

from shellcore.topics import aliascmds, shell

ALL_COMMANDS = {}
ALL_COMMANDS.update(aliascmds.COMMANDS)
ALL_COMMANDS.update(shell.COMMANDS)
