"""Helper module scaffold exports."""

from .helper_modules import HelperScaffoldError, build_helper_modules, write_helper_modules

__all__ = [
    "HelperScaffoldError",
    "build_helper_modules",
    "write_helper_modules",
]
