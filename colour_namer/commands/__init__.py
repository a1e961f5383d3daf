"""colour-namer commands.

Each public module here defines a `command` object and is picked up by
colour_namer.registry.discover(). The module docstring doubles as the
command's `colour-namer help <name>` text; its first line is the short help.
"""
