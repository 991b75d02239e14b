"""primkit — is / has / to helpers for arrays, strings and numbers.

Every helper takes a value of unknown type, checks its kind first, and
answers with ``False`` or a documented sentinel instead of raising.
Type guards for built-in kinds live in :mod:`primkit.core.guards`.
"""

from primkit.core import *  # noqa: F403
from primkit.core import __all__ as _core_all
from primkit.version import __version__

__all__: list[str] = ["__version__", *_core_all]
