"""
Daubechies scaling functions evaluated in the dyadic rationals.

The values at the integers are the fixed point of the dilation matrix; the values
at level L follow from the two-scale relation
	phi(x) = sqrt(2) sum_j h_j phi(2x - a - j)
since 2x is a dyadic rational of level L-1.
"""
import numpy as np

from daubscale.constants import SQRT2, ZERO_SUM_TOL
from daubscale.errors import DegenerateRefinementEquation
from daubscale.filters import InteriorFilter
from daubscale.fixed_point import FixedPointSolver
from daubscale.helpers.dyadic import (check_resolution, dyadic_positions, dyadic_rationals,
									  positions_at_level, index_of, is_inside)
from daubscale.matrices import build_dilation_matrix


def haar_scaling(x, J=0, k=0):
	"""
	The Haar scaling function at level J and translation k.

	>>> haar_scaling(np.array([-0.5, 0., 0.5, 1.]))
	array([0., 1., 1., 0.])
	"""
	y = 2. ** J * np.asarray(x, dtype=float) - k
	return 2. ** (J / 2.) * np.logical_and(0. <= y, y < 1.).astype(float)


def integer_values(C, solver=None):
	"""
	Values of the scaling function of the filter C at the integers of its support.

	:param C: InteriorFilter
	:param solver: FixedPointSolver, default uses scipy
	:return: numpy array, summing to one and vanishing at both ends
	"""
	a, b = C.support
	if C.van_moment == 1:
		return haar_scaling(np.arange(a, b + 1) - a)

	if solver is None:
		solver = FixedPointSolver()
	E = solver.solve(build_dilation_matrix(C.taps()))

	total = np.sum(E)
	if np.abs(total) < ZERO_SUM_TOL:
		raise DegenerateRefinementEquation("Fixed point sums to zero and cannot be normalized.")
	E = E / total

	E[0] = 0.
	E[-1] = 0.
	return E


def dyadic_values(C, R, solver=None, verbose=False):
	"""
	Values of the scaling function of the filter C at the dyadic rationals of resolution R.

	:param C: InteriorFilter
	:param R: resolution, non-negative
	:param solver: FixedPointSolver used for the integer values
	:param verbose: print progress per level
	:return: numpy array aligned with dyadic_rationals(C.support, R)
	"""
	check_resolution(R)
	supp = C.support

	if C.van_moment == 1:
		return haar_scaling(dyadic_rationals(supp, R) - supp[0])

	phi = np.zeros(shape=dyadic_positions(supp, R).shape[0], dtype=float)
	phi[index_of(positions_at_level(supp, R, 0), supp, R)] = integer_values(C, solver)

	h = C.taps()
	translations = (supp[0] + np.arange(len(h))) * 2 ** R

	for L in range(1, R + 1):
		positions = positions_at_level(supp, R, L)
		for n in positions:
			val = 0.
			for hj, t in zip(h, translations):
				parent = 2 * n - t
				if is_inside(parent, supp, R):
					val += SQRT2 * hj * phi[index_of(parent, supp, R)]
			phi[index_of(n, supp, R)] = val

		if verbose:
			print("Level", L, "of", R, ":", positions.shape[0], "new values.")

	return phi


def daubechies_scaling(p, R, symmlet=False, verbose=False):
	"""
	Daubechies (or symmlet) scaling function with p vanishing moments at resolution R.

	:return: (x, phi) abscissae and function values
	"""
	C = InteriorFilter.symmlet(p) if symmlet else InteriorFilter.daubechies(p)
	x = dyadic_rationals(C.support, R)
	phi = dyadic_values(C, R, verbose=verbose)
	return x, phi
