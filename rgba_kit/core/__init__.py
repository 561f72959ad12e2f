"""rgba_kit.core — Foundation layer.

Contains the Color value type, metrics, transforms, string parsing, the
named palette, settings and report types.
This module has NO dependencies on rgba_kit.commands or rgba_kit.registry.
Only stdlib, numpy, and PIL are allowed here.
"""
