from tests.phantoms._EllipsePhantomTestData import EllipsePhantomTestData

__all__ = ["EllipsePhantomTestData"]
