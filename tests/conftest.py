"""
Shared filters for the tests.

The boundary filters are not the Cohen-Daubechies-Vial tables; their boundary blocks are
chosen with known eigenvalues (1, 1/2, ...) so that the fixed points are easy to check.
"""
import numpy as np
import pytest

from daubscale.filters import InteriorFilter, BoundaryFilter

SQ3 = np.sqrt(3.)
DB2 = np.array([1. + SQ3, 3. + SQ3, 3. - SQ3, 1. - SQ3]) / (4. * np.sqrt(2.))

LEFT2 = [
	np.array([1., 0., 0.2 * np.sqrt(2.)]) / np.sqrt(2.),
	np.array([0.3, 0.5, 0.1 * np.sqrt(2.), 0.4 * np.sqrt(2.), -0.1 * np.sqrt(2.)]) / np.sqrt(2.),
]

LEFT3 = [
	np.array([1., 0., 0., 0.3]) / np.sqrt(2.),
	np.array([0.2, 0.5, 0., 0.1, 0.4, -0.2]) / np.sqrt(2.),
	np.array([0.1, -0.3, 0.25, 0.05, 0.2, 0.3, -0.1, 0.02]) / np.sqrt(2.),
]


@pytest.fixture
def db2():
	return InteriorFilter(DB2)


@pytest.fixture
def sym2():
	return InteriorFilter(DB2, support=(-1, 2))


@pytest.fixture
def sym3():
	return InteriorFilter.symmlet(3)


@pytest.fixture
def left2():
	return BoundaryFilter(LEFT2, 'L')


@pytest.fixture
def right2():
	return BoundaryFilter(LEFT2, 'R')


@pytest.fixture
def left3():
	return BoundaryFilter(LEFT3, 'L')


@pytest.fixture
def right3():
	return BoundaryFilter(LEFT3, 'R')
