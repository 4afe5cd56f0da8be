from importlib.resources import files

from .core import intersection, union
from .interpolation import interpolated_from, interpolated_from_to, interpolated_to
from .interval import Interval, ivl
from .ranges import ClosedRange
from .sampling import UniformSource, uniform, uniform_many

# Load documentation files for programmatic access by agents and code-aware tools
_docs_path = files(__package__) / "docs"
docs = {
    "readme": (_docs_path / "README.md").read_text(),
    "api": (_docs_path / "API.md").read_text(),
}

__all__ = [
    "Interval",
    "ClosedRange",
    "ivl",
    "union",
    "intersection",
    "interpolated_to",
    "interpolated_from",
    "interpolated_from_to",
    "UniformSource",
    "uniform",
    "uniform_many",
    "docs",
]
