"""contrast_checker.core — Foundation layer.

Contains the colour conversions, WCAG contrast maths, the adjustment search,
the audit runner, token resolvers, case-file loading and report rendering.
This module has NO dependencies on contrast_checker.commands or
contrast_checker.registry, and performs no I/O beyond reading files it is
explicitly handed.
"""
