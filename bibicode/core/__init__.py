"""Core conversion modules.

WHY: The core package is the exact, dependency-free heart of bibicode:
the numeral system model, the symbol parser, the radix conversion engine
and the Coder that chains them. Everything else (catalog, definition
files, CLI) only builds inputs for these modules.

HOW: numeral.py defines NumeralSystem, parser.py reads and writes digit
sequences, engine.py converts digit sequences through a binary pivot,
coder.py binds a source and a target system.

RULES:
- Core modules never log, print, or touch the file system
- All values passed between modules are plain lists and frozen objects
"""
