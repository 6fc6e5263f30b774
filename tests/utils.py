import importlib.util
import sys
from pathlib import Path

PACKAGE = "refschema"

def setup():
    """Import the refschema package from this checkout, without installing it."""
    packageRoot = Path(__file__).parent.parent
    if str(packageRoot) not in sys.path:
        sys.path.insert(0, str(packageRoot))

    # Loaded once; later test modules share the same classes
    if PACKAGE in sys.modules:
        return sys.modules[PACKAGE]

    packageInit = packageRoot.joinpath(PACKAGE, "__init__.py")
    spec = importlib.util.spec_from_file_location(PACKAGE, packageInit)
    package = importlib.util.module_from_spec(spec)
    sys.modules[PACKAGE] = package
    spec.loader.exec_module(package)

    return package
