"""
Auto-import all panel modules to ensure registration side-effects run.

After importing this package, `registry.list_keys()` and `registry.create_panel()`
will know about all available sections.
"""
from __future__ import annotations

import importlib
import pkgutil

from iitquantity.app.ui import panels as _panels_pkg

for _module in pkgutil.iter_modules(_panels_pkg.__path__, _panels_pkg.__name__ + "."):
    importlib.import_module(_module.name)
