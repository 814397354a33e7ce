"""Tests for ellipse phantom."""

import numpy as np
import pytest
import torch
from shepplogan.phantoms import MODIFIED_SHEPP_LOGAN, EllipsePhantom, Rectangle, kspace_grid, shepplogan_modified

from tests import inverse_fourier_transform, relative_image_difference


def test_default_is_modified_shepp_logan():
    """Without shapes the phantom is the modified Shepp-Logan phantom."""
    phantom = EllipsePhantom()
    assert phantom.shapes == list(MODIFIED_SHEPP_LOGAN)
    assert torch.equal(phantom.image_space(64, 64), shepplogan_modified(64, 64))


def test_image_space(ellipse_phantom):
    """Check if image space has correct shape."""
    img = ellipse_phantom.phantom.image_space(ellipse_phantom.n_x, ellipse_phantom.n_y)
    assert img.shape == (ellipse_phantom.n_x, ellipse_phantom.n_y)


def test_kspace_grid():
    """Check shape and spacing of the k-space locations."""
    kx, ky = kspace_grid(8, 6)
    assert kx.shape == ky.shape == (8, 6)
    torch.testing.assert_close(kx[:, 0], torch.arange(-4, 4, dtype=torch.float64) / 2)
    torch.testing.assert_close(ky[0, :], torch.arange(-3, 3, dtype=torch.float64) / 2)


def test_kspace_correct_shape(ellipse_phantom):
    """Check if kspace has correct shape."""
    kdata = ellipse_phantom.phantom.kspace(ellipse_phantom.kx, ellipse_phantom.ky)
    assert kdata.shape == (ellipse_phantom.n_x, ellipse_phantom.n_y)
    assert kdata.dtype == torch.complex128


def test_kspace_raises_error(ellipse_phantom):
    """Check if kspace raises error if kx and ky have different shapes."""
    kx_, _ = kspace_grid(ellipse_phantom.n_x + 1, ellipse_phantom.n_y)
    with pytest.raises(ValueError):
        ellipse_phantom.phantom.kspace(kx_, ellipse_phantom.ky)


def test_kspace_array_like_locations():
    """K-space locations given as numpy arrays or lists match tensor locations."""
    kx, ky = kspace_grid(8, 6)
    phantom = EllipsePhantom([*MODIFIED_SHEPP_LOGAN[:3], Rectangle(0.1, 0.2, 0.3, 0.4, 0.5, 2.0)])
    expected = phantom.kspace(kx, ky)
    torch.testing.assert_close(phantom.kspace(kx.numpy(), ky.numpy()), expected)
    torch.testing.assert_close(phantom.kspace(kx.tolist(), ky.tolist()), expected)


def test_kspace_array_like_raises_error():
    """Mismatched shapes of array-like locations are rejected."""
    with pytest.raises(ValueError, match='shape mismatch'):
        EllipsePhantom().kspace(np.zeros((4, 3)), np.zeros((3, 4)))


def test_kspace_is_sum_of_shapes():
    """The k-space of a phantom is the sum of the k-space of its shapes."""
    kx, ky = kspace_grid(16, 16)
    rectangle = Rectangle(0.1, 0.2, 0.3, 0.4, 0.5, 2.0)
    phantom = EllipsePhantom([*MODIFIED_SHEPP_LOGAN[:2], rectangle])
    expected = sum(shape.kspace(kx, ky) for shape in phantom.shapes)
    torch.testing.assert_close(phantom.kspace(kx, ky), expected)


def test_kspace_image_match(ellipse_phantom):
    """Check if the inverse Fourier transform of kspace matches image."""
    img = ellipse_phantom.phantom.image_space(ellipse_phantom.n_x, ellipse_phantom.n_y)
    kdata = ellipse_phantom.phantom.kspace(ellipse_phantom.kx, ellipse_phantom.ky)
    reconstructed_img = inverse_fourier_transform(kdata, ellipse_phantom.kx, ellipse_phantom.ky)
    # Due to discretization artifacts the reconstructed image will be different to the reference image. Using standard
    # testing functions such as numpy.testing.assert_almost_equal fails because there are few voxels with high
    # differences along the edges of the elliptic objects.
    assert relative_image_difference(reconstructed_img, img) <= 0.05
