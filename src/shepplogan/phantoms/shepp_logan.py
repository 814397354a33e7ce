"""Shepp-Logan phantoms.

The Shepp-Logan phantom is the sum of 10 ellipses and a common test image for image reconstruction.
Two versions are provided: the original one [SHE1974]_ and a version with higher contrast [TOF1996]_.

References
----------
.. [SHE1974] Shepp LA, Logan BF (1974) The Fourier reconstruction of a head section.
   IEEE Transactions on Nuclear Science 21(3) https://doi.org/10.1109/TNS.1974.6499235
.. [TOF1996] Toft PA (1996) The Radon Transform - Theory and Implementation. PhD thesis,
   Department of Mathematical Modelling, Technical University of Denmark
"""

import math
from typing import Any

import torch

from shepplogan.phantoms.phantom import phantom
from shepplogan.phantoms.phantom_elements import Ellipse

SHEPP_LOGAN = (
    Ellipse(center_x=0.0, center_y=0.35, radius_a=0.21, radius_b=0.25, rotation=0.0, intensity=0.01),
    Ellipse(center_x=0.0, center_y=0.1, radius_a=0.046, radius_b=0.046, rotation=0.0, intensity=0.01),
    Ellipse(center_x=0.0, center_y=-0.1, radius_a=0.046, radius_b=0.046, rotation=0.0, intensity=0.01),
    Ellipse(center_x=-0.08, center_y=-0.605, radius_a=0.046, radius_b=0.023, rotation=0.0, intensity=0.01),
    Ellipse(center_x=0.0, center_y=-0.605, radius_a=0.023, radius_b=0.023, rotation=0.0, intensity=0.01),
    Ellipse(center_x=0.06, center_y=-0.605, radius_a=0.023, radius_b=0.046, rotation=0.0, intensity=0.01),
    Ellipse(center_x=0.22, center_y=0.0, radius_a=0.11, radius_b=0.31, rotation=math.radians(-18), intensity=-0.02),
    Ellipse(center_x=-0.22, center_y=0.0, radius_a=0.16, radius_b=0.41, rotation=math.radians(18), intensity=-0.02),
    Ellipse(center_x=0.0, center_y=-0.0184, radius_a=0.6624, radius_b=0.874, rotation=0.0, intensity=-0.98),
    Ellipse(center_x=0.0, center_y=0.0, radius_a=0.69, radius_b=0.92, rotation=0.0, intensity=2.0),
)
"""Ellipses of the original Shepp-Logan phantom."""

MODIFIED_SHEPP_LOGAN = (
    Ellipse(center_x=0.0, center_y=0.35, radius_a=0.21, radius_b=0.25, rotation=0.0, intensity=0.1),
    Ellipse(center_x=0.0, center_y=0.1, radius_a=0.046, radius_b=0.046, rotation=0.0, intensity=0.1),
    Ellipse(center_x=0.0, center_y=-0.1, radius_a=0.046, radius_b=0.046, rotation=0.0, intensity=0.1),
    Ellipse(center_x=-0.08, center_y=-0.605, radius_a=0.046, radius_b=0.023, rotation=0.0, intensity=0.1),
    Ellipse(center_x=0.0, center_y=-0.605, radius_a=0.023, radius_b=0.023, rotation=0.0, intensity=0.1),
    Ellipse(center_x=0.06, center_y=-0.605, radius_a=0.023, radius_b=0.046, rotation=0.0, intensity=0.1),
    Ellipse(center_x=0.22, center_y=0.0, radius_a=0.11, radius_b=0.31, rotation=math.radians(-18), intensity=-0.2),
    Ellipse(center_x=-0.22, center_y=0.0, radius_a=0.16, radius_b=0.41, rotation=math.radians(18), intensity=-0.2),
    Ellipse(center_x=0.0, center_y=-0.0184, radius_a=0.6624, radius_b=0.874, rotation=0.0, intensity=-0.8),
    Ellipse(center_x=0.0, center_y=0.0, radius_a=0.69, radius_b=0.92, rotation=0.0, intensity=1.0),
)
"""Ellipses of the modified Shepp-Logan phantom with higher contrast."""


def shepplogan(nx: int, ny: int, **kwargs: Any) -> torch.Tensor:
    """Original Shepp-Logan phantom [SHE1974]_.

    Values are between 0.0 and 2.0.

    Parameters
    ----------
    nx
        number of cells along x
    ny
        number of cells along y
    kwargs
        passed on to `phantom`, e.g. `workers`
    """
    return phantom(SHEPP_LOGAN, nx, ny, **kwargs)


def shepplogan_modified(nx: int, ny: int, **kwargs: Any) -> torch.Tensor:
    """Modified Shepp-Logan phantom with higher contrast [TOF1996]_.

    Values are between 0.0 and 1.0. If unsure which version to use, use this one.

    Parameters
    ----------
    nx
        number of cells along x
    ny
        number of cells along y
    kwargs
        passed on to `phantom`, e.g. `workers`
    """
    return phantom(MODIFIED_SHEPP_LOGAN, nx, ny, **kwargs)
