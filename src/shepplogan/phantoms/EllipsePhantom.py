"""Numerical phantom with ellipses."""

from collections.abc import Sequence

import torch
from numpy.typing import ArrayLike

from shepplogan.phantoms.phantom import phantom
from shepplogan.phantoms.phantom_elements import Shape, _as_coordinates
from shepplogan.phantoms.shepp_logan import MODIFIED_SHEPP_LOGAN


def kspace_grid(nx: int, ny: int) -> tuple[torch.Tensor, torch.Tensor]:
    """Create k-space locations matching an image of nx x ny cells.

    The image covers [-1, 1] along both axes, so the k-space locations are spaced by 1/2 and
    range from -n/4 to n/4 - 1/2.

    Parameters
    ----------
    nx
        number of cells along x
    ny
        number of cells along y

    Returns
    -------
        kx and ky, each of shape (nx, ny)
    """
    kx = torch.arange(-(nx // 2), nx - nx // 2, dtype=torch.float64) / 2
    ky = torch.arange(-(ny // 2), ny - ny // 2, dtype=torch.float64) / 2
    kx, ky = torch.meshgrid(kx, ky, indexing='ij')
    return kx, ky


class EllipsePhantom:
    """Numerical phantom as the sum of different ellipses (or other shapes).

    Parameters
    ----------
        shapes
            shapes defined by their center, size, rotation and intensity.
            if None, defaults to the modified Shepp-Logan phantom.
    """

    def __init__(self, shapes: Sequence[Shape] | None = None):
        """Initialize ellipse phantom.

        Parameters
        ----------
        shapes
            Sequence of Ellipse or Rectangle defining the phantom.
            if None, defaults to the ten ellipses of the modified Shepp-Logan phantom.
        """
        if shapes is None:
            self.shapes: list[Shape] = list(MODIFIED_SHEPP_LOGAN)
        else:
            self.shapes = list(shapes)

    def kspace(self, kx: ArrayLike, ky: ArrayLike) -> torch.Tensor:
        """Create 2D analytic k-space data based on given k-space locations.

        This is the continuous Fourier transform of the phantom, with k in cycles per unit of the
        normalized domain. Use `kspace_grid` for the locations matching a sampled image.

        Parameters
        ----------
        kx
            k-space locations in kx, tensor or array-like
        ky
            k-space locations in ky. Same shape as kx.
        """
        kx, ky = _as_coordinates(kx), _as_coordinates(ky)
        # kx and ky have to be of same shape
        if kx.shape != ky.shape:
            raise ValueError(f'shape mismatch between kx {kx.shape} and ky {ky.shape}')

        kdata = torch.zeros_like(kx, dtype=torch.complex128)
        for shape in self.shapes:
            kdata += shape.kspace(kx, ky)
        return kdata

    def image_space(self, nx: int, ny: int, workers: int = 1) -> torch.Tensor:
        """Create image representation of phantom.

        Parameters
        ----------
        nx
            number of cells along x
        ny
            number of cells along y
        workers
            number of threads used to create the image
        """
        return phantom(self.shapes, nx, ny, workers=workers)
