"""Building blocks for numerical phantoms."""

import dataclasses
import math

import numpy as np
import torch
from numpy.typing import ArrayLike
from typing_extensions import Protocol


def _as_coordinates(x: ArrayLike) -> torch.Tensor:
    """Convert ArrayLike coordinates to a float64 tensor."""
    if isinstance(x, torch.Tensor):
        return x.to(torch.float64)
    return torch.as_tensor(np.asarray(x, dtype=np.float64))


class Shape(Protocol):
    """Protocol for the elements a phantom is composed of."""

    @property
    def center_x(self) -> float: ...

    @property
    def center_y(self) -> float: ...

    @property
    def rotation(self) -> float: ...

    @property
    def intensity(self) -> float: ...

    def mask(self, x: ArrayLike, y: ArrayLike) -> torch.Tensor: ...

    def inside(self, x: float, y: float) -> bool: ...

    def is_empty(self) -> bool: ...

    def bounding_box(self) -> tuple[float, float, float, float]: ...

    def kspace(self, kx: ArrayLike, ky: ArrayLike) -> torch.Tensor: ...


def _to_shape_frame(shape: Shape, x: ArrayLike, y: ArrayLike) -> tuple[torch.Tensor, torch.Tensor]:
    """Translate points by the center of the shape and rotate them by -rotation."""
    dx = _as_coordinates(x) - shape.center_x
    dy = _as_coordinates(y) - shape.center_y
    cos, sin = math.cos(shape.rotation), math.sin(shape.rotation)
    return cos * dx + sin * dy, cos * dy - sin * dx


def _rotate_wave_vector(shape: Shape, kx: torch.Tensor, ky: torch.Tensor) -> tuple[torch.Tensor, torch.Tensor]:
    """Express k-space locations along the axes of the shape."""
    cos, sin = math.cos(shape.rotation), math.sin(shape.rotation)
    return cos * kx + sin * ky, cos * ky - sin * kx


def _shift(shape: Shape, kx: torch.Tensor, ky: torch.Tensor) -> torch.Tensor:
    """Phase ramp corresponding to the position of the center."""
    return torch.exp(-2j * torch.pi * (shape.center_x * kx + shape.center_y * ky))


@dataclasses.dataclass(slots=True, frozen=True)
class Ellipse:
    """Ellipse defined on the normalized domain [-1, 1] x [-1, 1].

    Parameters
    ----------
    center_x
        x coordinate of the center
    center_y
        y coordinate of the center
    radius_a
        semi-axis along the (rotated) first axis of the ellipse
    radius_b
        semi-axis along the (rotated) second axis of the ellipse
    rotation
        counter-clockwise rotation of the ellipse in radians
    intensity
        value added to every point inside the ellipse
    """

    center_x: float
    center_y: float
    radius_a: float
    radius_b: float
    rotation: float
    intensity: float

    def is_empty(self) -> bool:
        """Check if no point can be inside the ellipse."""
        # also catches nan
        return not (self.radius_a > 0 and self.radius_b > 0)

    def mask(self, x: ArrayLike, y: ArrayLike) -> torch.Tensor:
        """Check which points are inside the ellipse, boundary included.

        Parameters
        ----------
        x
            x coordinates, broadcastable with `y`
        y
            y coordinates, broadcastable with `x`

        Returns
        -------
            boolean tensor of the broadcasted shape of `x` and `y`
        """
        u, v = _to_shape_frame(self, x, y)
        if self.is_empty():
            return torch.zeros_like(u + v, dtype=torch.bool)
        return (u / self.radius_a) ** 2 + (v / self.radius_b) ** 2 <= 1

    def inside(self, x: float, y: float) -> bool:
        """Check if a single point is inside the ellipse."""
        return bool(self.mask(x, y))

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Axis-aligned bounding box of the rotated ellipse.

        Returns
        -------
            (min_x, max_x, min_y, max_y)
        """
        cos, sin = math.cos(self.rotation), math.sin(self.rotation)
        half_width = math.sqrt((self.radius_a * cos) ** 2 + (self.radius_b * sin) ** 2)
        half_height = math.sqrt((self.radius_a * sin) ** 2 + (self.radius_b * cos) ** 2)
        return (
            self.center_x - half_width,
            self.center_x + half_width,
            self.center_y - half_height,
            self.center_y + half_height,
        )

    def kspace(self, kx: ArrayLike, ky: ArrayLike) -> torch.Tensor:
        """Continuous Fourier transform of the ellipse.

        The Fourier representation of ellipses can be analytically described by Bessel functions [KOA2007]_.

        Parameters
        ----------
        kx
            k-space locations along x in cycles per unit of the normalized domain
        ky
            k-space locations along y. Same shape as kx.

        References
        ----------
        .. [KOA2007] Koay C, Sarlls J, Oezarslan E (2007) Three-dimensional analytical magnetic resonance imaging
           phantom in the Fourier domain. MRM 58(2) https://doi.org/10.1002/mrm.21292
        """
        kx, ky = _as_coordinates(kx), _as_coordinates(ky)
        if self.is_empty():
            return torch.zeros_like(kx + ky, dtype=torch.complex128)
        ku, kv = _rotate_wave_vector(self, kx, ky)
        rho = torch.sqrt((self.radius_a * ku) ** 2 + (self.radius_b * kv) ** 2)
        rho = rho.clamp(min=1e-9)  # J1(2 pi rho) / rho tends to pi
        envelope = self.radius_a * self.radius_b * torch.special.bessel_j1(2 * torch.pi * rho) / rho
        return self.intensity * envelope * _shift(self, kx, ky)


@dataclasses.dataclass(slots=True, frozen=True)
class Rectangle:
    """Rectangle defined on the normalized domain [-1, 1] x [-1, 1].

    Parameters
    ----------
    center_x
        x coordinate of the center
    center_y
        y coordinate of the center
    width
        edge length along the (rotated) first axis
    height
        edge length along the (rotated) second axis
    rotation
        counter-clockwise rotation about the center in radians
    intensity
        value added to every point inside the rectangle
    """

    center_x: float
    center_y: float
    width: float
    height: float
    rotation: float
    intensity: float

    def is_empty(self) -> bool:
        """Check if no point can be inside the rectangle."""
        return not (self.width > 0 and self.height > 0)

    def mask(self, x: ArrayLike, y: ArrayLike) -> torch.Tensor:
        """Check which points are inside the rectangle, edges included."""
        u, v = _to_shape_frame(self, x, y)
        if self.is_empty():
            return torch.zeros_like(u + v, dtype=torch.bool)
        return (u.abs() <= self.width / 2) & (v.abs() <= self.height / 2)

    def inside(self, x: float, y: float) -> bool:
        """Check if a single point is inside the rectangle."""
        return bool(self.mask(x, y))

    def bounding_box(self) -> tuple[float, float, float, float]:
        """Axis-aligned bounding box (min_x, max_x, min_y, max_y) of the rotated rectangle."""
        cos, sin = abs(math.cos(self.rotation)), abs(math.sin(self.rotation))
        half_width = (abs(self.width) * cos + abs(self.height) * sin) / 2
        half_height = (abs(self.width) * sin + abs(self.height) * cos) / 2
        return (
            self.center_x - half_width,
            self.center_x + half_width,
            self.center_y - half_height,
            self.center_y + half_height,
        )

    def kspace(self, kx: ArrayLike, ky: ArrayLike) -> torch.Tensor:
        """Continuous Fourier transform of the rectangle, a product of two sinc functions."""
        kx, ky = _as_coordinates(kx), _as_coordinates(ky)
        if self.is_empty():
            return torch.zeros_like(kx + ky, dtype=torch.complex128)
        ku, kv = _rotate_wave_vector(self, kx, ky)
        envelope = self.width * self.height * torch.sinc(self.width * ku) * torch.sinc(self.height * kv)
        return self.intensity * envelope * _shift(self, kx, ky)
