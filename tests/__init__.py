from tests._RandomGenerator import RandomGenerator
from tests.helper import inverse_fourier_transform, relative_image_difference

__all__ = ["RandomGenerator", "inverse_fourier_transform", "relative_image_difference"]
