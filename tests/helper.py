"""Helper/Utilities for test functions."""

import torch
from shepplogan.phantoms import grid_coordinates


def relative_image_difference(img1: torch.Tensor, img2: torch.Tensor) -> torch.Tensor:
    """Calculate mean absolute relative difference between two images.

    Parameters
    ----------
    img1
        first image
    img2
        second image

    Returns
    -------
        mean absolute relative difference between images
    """
    image_difference = torch.mean(torch.abs(img1 - img2))
    image_mean = 0.5 * torch.mean(torch.abs(img1) + torch.abs(img2))
    if image_mean == 0:
        raise ValueError('average of images should be larger than 0')
    return image_difference / image_mean


def inverse_fourier_transform(kdata: torch.Tensor, kx: torch.Tensor, ky: torch.Tensor) -> torch.Tensor:
    """Image on the phantom grid from k-space data sampled at the locations of `kspace_grid`.

    Evaluates the inverse discrete Fourier sum explicitly at the cell centers, so no shifts
    are necessary.

    Parameters
    ----------
    kdata
        k-space data of shape (nx, ny)
    kx
        k-space locations along x, shape (nx, ny)
    ky
        k-space locations along y, shape (nx, ny)
    """
    nx, ny = kdata.shape
    x, y = grid_coordinates(nx), grid_coordinates(ny)
    encoding_x = torch.exp(2j * torch.pi * torch.outer(x, kx[:, 0]))
    encoding_y = torch.exp(2j * torch.pi * torch.outer(y, ky[0, :]))
    # area of a cell in k-space is 1/2 x 1/2
    return encoding_x @ kdata @ encoding_y.T / 4
