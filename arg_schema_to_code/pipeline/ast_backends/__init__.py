"""
Backends module.

Contains the C# type mapping, member rendering and the indentation-aware writer.
"""
