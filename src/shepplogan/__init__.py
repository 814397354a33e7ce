from shepplogan._version import __version__
from shepplogan import phantoms
from shepplogan.phantoms import (
    Ellipse,
    EllipsePhantom,
    Rectangle,
    phantom,
    shepplogan,
    shepplogan_modified,
)

__all__ = [
    "Ellipse",
    "EllipsePhantom",
    "Rectangle",
    "__version__",
    "phantom",
    "phantoms",
    "shepplogan",
    "shepplogan_modified"
]
