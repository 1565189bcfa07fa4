"""Root conftest.py for test configuration.

Ensures local src/ directory takes priority over any installed packages,
and provides helpers to build symtypes trees on disk.
"""

import sys
from collections.abc import Callable
from pathlib import Path

import pytest

# Insert local src directory at the beginning of sys.path
_src_dir = Path(__file__).parent.parent / "src"
if str(_src_dir) not in sys.path:
    sys.path.insert(0, str(_src_dir))

# Force reimport of ksymtypes modules if already imported
for module_name in list(sys.modules.keys()):
    if module_name.startswith("ksymtypes"):
        del sys.modules[module_name]

WriteSymtypes = Callable[[Path, str, str], Path]


@pytest.fixture
def write_symtypes() -> WriteSymtypes:
    """Write one symtypes file below a root directory, creating parents."""

    def _write(root: Path, relpath: str, content: str) -> Path:
        path = root / relpath
        path.parent.mkdir(parents=True, exist_ok=True)
        path.write_text(content)
        return path

    return _write
