"""contrast-tool subcommands.

Each module defines `command = Command(...)` and is picked up by
contrast_checker.registry.discover(). The module docstring is what
`contrast-tool help <name>` prints.
"""
