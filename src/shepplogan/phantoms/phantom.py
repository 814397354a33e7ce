"""Rasterization of shapes onto a grid."""

import concurrent.futures
import math
from collections.abc import Sequence

import torch
from einops import rearrange

from shepplogan.phantoms.phantom_elements import Shape


def grid_coordinates(n: int) -> torch.Tensor:
    """Sample coordinates along one axis of the grid.

    The samples are the centers of `n` pixels of equal size that cover [-1, 1],
    i.e. `(2 * i + 1) / n - 1` for `i` in `[0, n)`.

    Parameters
    ----------
    n
        number of samples

    Returns
    -------
        1D float64 tensor of increasing coordinates
    """
    return (2 * torch.arange(n, dtype=torch.float64) + 1) / n - 1


def _index_range(coordinates: torch.Tensor, low: float, high: float) -> tuple[int, int]:
    """Indices [start, stop) of the sorted coordinates within [low, high], widened by one sample."""
    if math.isnan(low) or math.isnan(high):
        return 0, len(coordinates)
    bounds = torch.tensor([low, high], dtype=torch.float64)
    start = int(torch.searchsorted(coordinates, bounds[:1]).item())
    stop = int(torch.searchsorted(coordinates, bounds[1:], right=True).item())
    return max(start - 1, 0), min(stop + 1, len(coordinates))


def _rasterize(shapes: Sequence[Shape], x: torch.Tensor, y: torch.Tensor, use_bounding_box: bool) -> torch.Tensor:
    """Sum of the intensities of all shapes on the grid spanned by x and y."""
    image = torch.zeros(len(x), len(y), dtype=torch.float64)
    if not image.numel():
        return image
    for shape in shapes:
        if shape.is_empty():
            continue
        if use_bounding_box:
            min_x, max_x, min_y, max_y = shape.bounding_box()
            start_x, stop_x = _index_range(x, min_x, max_x)
            start_y, stop_y = _index_range(y, min_y, max_y)
        else:
            start_x, stop_x, start_y, stop_y = 0, len(x), 0, len(y)
        if start_x >= stop_x or start_y >= stop_y:
            continue
        in_shape = shape.mask(
            rearrange(x[start_x:stop_x], 'x -> x 1'),
            rearrange(y[start_y:stop_y], 'y -> 1 y'),
        )
        image[start_x:stop_x, start_y:stop_y][in_shape] += shape.intensity
    return image


def phantom(
    shapes: Sequence[Shape],
    nx: int,
    ny: int,
    *,
    workers: int = 1,
    use_bounding_box: bool = True,
) -> torch.Tensor:
    """Create a phantom as the sum of shapes.

    The grid covers the normalized domain [-1, 1] along both axes, independent of `nx` and `ny`.
    The value of each cell is the sum of the intensities of all shapes containing the center of the cell.

    Parameters
    ----------
    shapes
        ellipses or rectangles. Overlapping shapes add up.
    nx
        number of cells along x (first dimension of the result)
    ny
        number of cells along y (second dimension of the result)
    workers
        number of threads. The rows of the grid are split into contiguous blocks.
        The result does not depend on the number of workers.
    use_bounding_box
        only test cells within the bounding box of each shape. The result does not depend on this setting.

    Returns
    -------
        float64 tensor of shape (nx, ny)

    Raises
    ------
    ValueError
        If nx or ny is negative or workers is smaller than 1
    """
    if nx < 0 or ny < 0:
        raise ValueError(f'Grid size has to be non-negative, got nx={nx} and ny={ny}.')
    if workers < 1:
        raise ValueError(f'Number of workers has to be at least 1, got {workers}.')

    shapes = list(shapes)
    x, y = grid_coordinates(nx), grid_coordinates(ny)
    if workers == 1 or nx <= 1:
        return _rasterize(shapes, x, y, use_bounding_box)

    x_blocks = [block for block in torch.tensor_split(x, min(workers, nx)) if len(block)]
    with concurrent.futures.ThreadPoolExecutor(max_workers=workers) as executor:
        images = list(executor.map(lambda x_block: _rasterize(shapes, x_block, y, use_bounding_box), x_blocks))
    return torch.cat(images, dim=0)
