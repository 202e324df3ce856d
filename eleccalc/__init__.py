"""ElecCalc package entry.

Provides a stable module entrypoint (python -m eleccalc) while the code
itself lives in the top-level layers (core/, services/, infra/, screens/).
"""

from eleccalc.version import __version__  # single source of truth

__all__ = ["__version__"]
