"""rgba-kit commands.

Every .py file in this package that defines a `command` object is
auto-registered by rgba_kit.registry.discover().
"""
