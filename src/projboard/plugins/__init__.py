"""Extension layer — board plugins via pluggy.

Discovery: entry points (``projboard.plugins`` group) and single-file
plugins in ``.projboard/plugins/``.
INVARIANT: Plugin failures are warnings, never errors.
"""

from projboard.plugins.hookspecs import hookimpl
from projboard.plugins.manager import PluginManager

__all__ = ["PluginManager", "hookimpl"]
