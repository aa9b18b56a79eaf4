"""Creational patterns: factory, abstract factory, builder, prototype, singleton.

Each module is self-contained; none imports another.
"""
