from typing import TYPE_CHECKING, Any

import autosemver

if TYPE_CHECKING:
    # These imports are only for static type checkers (e.g., Pyright, IDEs).
    # At runtime, they are not executed, so the modules won't be imported unless needed.
    from time_period.enums import Designator
    from time_period.period import Period

try:
    __version__ = autosemver.packaging.get_current_version(project_name="time_period")
except Exception:
    __version__ = "0.0.0"


# Declare the public API of the package. This tells `from time_period import *` what to include.
__all__ = ["Designator", "Period"]  # noqa


def __getattr__(name: str) -> Any:
    # NOTE: We use __getattr__ for lazy imports instead of top-level imports because setuptools may evaluate
    #   this module during build (e.g., to use the value of time_period.__version__), before the submodules
    #   can be imported. This keeps builds from source working with dynamic versioning tools like autosemver.

    if name == "Period":
        from time_period.period import Period  # noqa: PLC0415

        return Period

    if name == "Designator":
        from time_period.enums import Designator  # noqa: PLC0415

        return Designator

    raise AttributeError(f"module {__name__} has no attribute {name}")
