from __future__ import annotations

import sys
from pathlib import Path

PACKAGE_NAME = "yapg"


def _resolve_repo_root(script_file: str | Path, package: str = PACKAGE_NAME) -> Path:
    """Return the checkout root for a wrapper living in `<root>/scripts/`.

    Only the wrapper's direct grandparent is considered; an ancestor that
    happens to contain a `yapg/` directory is never picked up.
    """
    repo_root = Path(script_file).resolve().parent.parent
    marker = repo_root / package / "__init__.py"
    if not marker.is_file():
        raise RuntimeError(
            "unable to resolve repository root from wrapper location; "
            f"expected wrapper under '<repo>/scripts/' with '<repo>/{package}/__init__.py' present"
        )
    return repo_root


def bootstrap_repo_path(script_file: str | Path | None = None) -> Path:
    root = _resolve_repo_root(__file__ if script_file is None else script_file)
    entry = str(root)
    if entry not in sys.path:
        sys.path.insert(0, entry)
    return root
