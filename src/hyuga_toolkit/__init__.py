"""Top-level package for the Hyuga scrapbook toolkit.

Provides subpackages:
- hyuga_toolkit.storage – project repository and content-addressed model store
- hyuga_toolkit.layout – page geometry and pagination
- hyuga_toolkit.export – PDF export orchestration and the asset wizard
- hyuga_toolkit.gui – Qt adapters for pickers and background export
"""

def _get_version() -> str:
    """Get version from pyproject.toml (dev) or importlib.metadata (installed)."""
    from pathlib import Path

    pyproject = Path(__file__).resolve().parent.parent.parent / "pyproject.toml"
    if pyproject.exists():
        try:
            for line in pyproject.read_text().splitlines():
                if line.strip().startswith("version"):
                    # Parse: version = "0.3.0"
                    return line.split("=")[1].strip().strip('"').strip("'")
        except OSError:
            pass

    try:
        from importlib.metadata import version as pkg_version
        return pkg_version("hyuga-toolkit")
    except Exception:
        return "0.0.0"

__version__ = _get_version()
__all__: list[str] = ["__version__"]
