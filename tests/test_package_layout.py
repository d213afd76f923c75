# Tests for verifying the package skeleton is importable and documented.

import importlib
import pkgutil

import mutilate


def test_root_package_has_docstring() -> None:
    """The root package should define a module docstring."""
    assert mutilate.__doc__ and mutilate.__doc__.strip()


def test_all_modules_have_docstrings() -> None:
    """Ensure every submodule can be imported and has a docstring."""
    for module_info in pkgutil.walk_packages(mutilate.__path__, mutilate.__name__ + "."):
        module = importlib.import_module(module_info.name)
        assert module.__doc__ and module.__doc__.strip(), f"Missing docstring in {module_info.name}"
