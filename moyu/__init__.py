"""Moyu package.

Moyu turns a plain text file into something that looks like source code:
  1) the text is decoded from a legacy encoding (GBK by default)
  2) every line becomes a comment plus a made-up statement inside a fake class
  3) a bookmark remembers where you stopped reading

Entry points:
  - CLI: `moyu`
"""

__all__ = ["__version__"]
__version__ = "0.1.0"
