"""Numerical Phantoms"""

from shepplogan.phantoms.phantom_elements import Ellipse, Rectangle, Shape
from shepplogan.phantoms.phantom import grid_coordinates, phantom
from shepplogan.phantoms.shepp_logan import MODIFIED_SHEPP_LOGAN, SHEPP_LOGAN, shepplogan, shepplogan_modified
from shepplogan.phantoms.EllipsePhantom import EllipsePhantom, kspace_grid

__all__ = [
    "Ellipse",
    "EllipsePhantom",
    "MODIFIED_SHEPP_LOGAN",
    "Rectangle",
    "SHEPP_LOGAN",
    "Shape",
    "grid_coordinates",
    "kspace_grid",
    "phantom",
    "shepplogan",
    "shepplogan_modified"
]
