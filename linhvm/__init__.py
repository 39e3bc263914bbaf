"""Runtime core of the Linh language: values, bytecode, conversions, arithmetic, packages and console I/O."""

__version__ = "0.1.0"