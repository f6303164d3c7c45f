"""lessport: tooling for comparing Sass- and Less-compiled Bootstrap CSS."""

__version__ = "0.1.0"
