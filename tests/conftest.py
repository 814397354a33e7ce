"""PyTest fixtures for the shepplogan package."""

import pytest
from shepplogan.phantoms import Ellipse

from tests import RandomGenerator
from tests.phantoms import EllipsePhantomTestData


@pytest.fixture(scope='session')
def ellipse_phantom():
    return EllipsePhantomTestData()


@pytest.fixture(params=(0, 1, 2, 3))
def random_ellipse(request) -> Ellipse:
    return RandomGenerator(request.param).ellipse()


@pytest.fixture(params=(0, 1))
def random_shapes(request) -> list:
    generator = RandomGenerator(request.param)
    return [generator.ellipse() for _ in range(6)] + [generator.rectangle() for _ in range(3)]
