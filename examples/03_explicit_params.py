"""Explicit parameters

Parameters can be declared without a destination, and read back by name.

Usage:

    python ./03_explicit_params.py -h
    python ./03_explicit_params.py -workers=4 -fast

"""

import sys

from flagbind import CommandLine, Param, ParamType

if __name__ == "__main__":
    command_line = CommandLine("usage: worker [flags]", spinner=False)
    command_line.set(Param("workers", usage="Worker count", type=ParamType.INT, default="1"))
    command_line.set(Param("fast", usage="Skip slow checks", type=ParamType.BOOL))

    result = command_line.parse()
    if result.help_requested:
        sys.exit(0)
    if not result:
        sys.exit(2)
    print(command_line.get_int("workers"), command_line.get_bool("fast"))
