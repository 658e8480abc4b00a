"""fileman package: interactive command-line file manager with a virtual working directory.

This package exposes submodules directly; keep __all__ empty to avoid static checks
that expect module-level symbols.
"""

__all__: list[str] = []
