"""Top-level package for SmartNUS.

Provides subpackages:
- smartnus.core – value objects, question variants and the question list
- smartnus.model – session state and the mutation API
- smartnus.logic – commands and the command controller
- smartnus.storage – JSON question bank and preference persistence
"""

def _get_version() -> str:
    """Version from the source checkout's pyproject.toml, else the installed metadata."""
    from importlib.metadata import PackageNotFoundError, version as pkg_version
    from pathlib import Path

    pyproject = Path(__file__).resolve().parents[2] / "pyproject.toml"
    if pyproject.is_file():
        try:
            for line in pyproject.read_text(encoding="utf-8").splitlines():
                key, _, value = line.partition("=")
                if key.strip() == "version":
                    return value.strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        return pkg_version("smartnus")
    except PackageNotFoundError:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
