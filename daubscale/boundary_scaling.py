"""
Boundary scaling functions evaluated in the dyadic rationals.

The k'th boundary scaling function on the left satisfies

	phi_k(x) = sqrt(2) sum_{l<p} H_{k,l} phi_l(2x) + sqrt(2) sum_{m=p}^{p+2k} H_{k,m} phi(2x - m)

with phi the interior scaling function on [1-p, p]. On the right the interior
translates are phi(2x + m + 1). The values at 0 only depend on each other and are
the fixed point of the boundary coefficient matrix; every other integer of the
support is reached from the outer edge inward.
"""
import numpy as np

from daubscale.constants import SQRT2
from daubscale.errors import DegenerateRefinementEquation, FilterMismatchError
from daubscale.filters import InteriorFilter, Side
from daubscale.fixed_point import FixedPointSolver
from daubscale.helpers.dyadic import (check_resolution, dyadic_positions, dyadic_rationals,
									  positions_at_level, index_of, is_inside, integers)
from daubscale.interior_scaling import haar_scaling, integer_values, dyadic_values
from daubscale.matrices import build_boundary_coefficient_matrix


def check_pair(B, C):
	"""
	:return: the common number of vanishing moments
	"""
	p = B.van_moment
	if C.van_moment != p:
		raise FilterMismatchError("Boundary filter has %d vanishing moments, interior filter %d."
								  % (p, C.van_moment))
	if tuple(C.support) != (1 - p, p):
		raise FilterMismatchError("Boundary filters pair with an interior filter on (%d,%d), got %s."
								  % (1 - p, p, str(C.support)))
	return p


def boundary_values_at_zero(B, neighbour=None, solver=None):
	"""
	Values of the boundary scaling functions at 0.

	Without neighbour this is the fixed point of the boundary coefficient matrix M
	with unit norm. With the values at the integer next to 0 (x = 1 on the left,
	x = -1 on the right) it is scaled to lim_j M^j neighbour, i.e. the continuous
	value at 0, which is the projection of neighbour on the fixed point along the
	other eigenvectors of M.

	:param B: BoundaryFilter
	:param neighbour: numpy array (p,)
	:param solver: FixedPointSolver
	:return: numpy array (p,)
	"""
	if solver is None:
		solver = FixedPointSolver()
	M = build_boundary_coefficient_matrix(B)
	values, vectors = solver.eigensystem(M)
	v = solver.fixed_point(values, vectors)
	if neighbour is None:
		return v

	radius = solver.subdominant_radius(values=values)
	if radius >= 1.:
		raise DegenerateRefinementEquation("Boundary matrix has an eigenvalue of modulus %f besides 1; "
										   "the values at 0 are not a limit." % radius)
	w = solver.left_solve(M)
	denominator = np.dot(w, v)
	if np.abs(denominator) < solver.params.tol:
		raise DegenerateRefinementEquation("Left and right fixed points of the boundary matrix are orthogonal.")
	return v * np.dot(w, neighbour) / denominator


def _interior_offsets(B, p):
	# the interior argument for tap m is 2x - start - step * (m - p)
	if B.side == Side.LEFT:
		return p, 1
	return -p - 1, -1


def _refine(B, Y, n, interior, R):
	"""
	Boundary scaling function values at the numerator n of resolution R.

	Y holds the boundary values at resolution R, interior the interior values at
	resolution R; positions outside either support contribute zero.
	"""
	p = B.van_moment
	BS = B.support
	IS = (1 - p, p)
	scale = 2 ** R
	start, step = _interior_offsets(B, p)

	double = 2 * n
	double_inside = is_inside(double, BS, R)

	values = np.zeros(shape=p, dtype=float)
	for k in range(p):
		h = B.taps(k)
		val = 0.

		if double_inside:
			val += SQRT2 * np.dot(h[0:p], Y[:, index_of(double, BS, R)])

		arg = double - start * scale
		for m in range(p, p + 2 * k + 1):
			if is_inside(arg, IS, R):
				val += SQRT2 * h[m] * interior[index_of(arg, IS, R)]
			arg -= step * scale

		values[k] = val
	return values


def _haar_boundary(B, R):
	x = dyadic_rationals(B.support, R)
	if B.side == Side.LEFT:
		return haar_scaling(x).reshape(1, -1)
	return haar_scaling(x + 1.).reshape(1, -1)


def boundary_integer_values(B, C, solver=None, interior=None):
	"""
	Values of the boundary scaling functions at the integers of their support.

	:param B: BoundaryFilter
	:param C: InteriorFilter with the same number of vanishing moments
	:param solver: FixedPointSolver
	:param interior: values of the interior scaling function at the integers of its support,
		computed with integer_values when not given
	:return: numpy array (p, number of integers); row k holds the k'th function
	"""
	p = check_pair(B, C)
	if p == 1:
		return _haar_boundary(B, 0)

	BS = B.support
	if interior is None:
		interior = integer_values(C, solver)
	Y = np.zeros(shape=(p, BS[1] - BS[0] + 1), dtype=float)

	for x in integers(BS):
		Y[:, index_of(x, BS)] = _refine(B, Y, x, interior, 0)

	neighbour = 1 if B.side == Side.LEFT else -1
	Y[:, index_of(0, BS)] = boundary_values_at_zero(B, Y[:, index_of(neighbour, BS)], solver)
	return Y


def boundary_dyadic_values(B, C, R, solver=None, verbose=False):
	"""
	Values of the boundary scaling functions at the dyadic rationals of resolution R.

	:param B: BoundaryFilter
	:param C: InteriorFilter with the same number of vanishing moments
	:param R: resolution, non-negative
	:param solver: FixedPointSolver
	:param verbose: print progress per level
	:return: numpy array (p, N) aligned with dyadic_rationals(B.support, R)
	"""
	check_resolution(R)
	p = check_pair(B, C)
	if p == 1:
		return _haar_boundary(B, R)

	BS = B.support
	interior = dyadic_values(C, R, solver)
	Y = np.zeros(shape=(p, dyadic_positions(BS, R).shape[0]), dtype=float)
	# integers of the interior support sit every 2^R slots
	integer_slots = index_of(positions_at_level(BS, R, 0), BS, R)
	Y[:, integer_slots] = boundary_integer_values(B, C, solver, interior[::2 ** R])

	for L in range(1, R + 1):
		positions = positions_at_level(BS, R, L)
		for n in positions:
			Y[:, index_of(n, BS, R)] = _refine(B, Y, n, interior, R)

		if verbose:
			print("Level", L, "of", R, ":", positions.shape[0], "new values.")

	return Y


def boundary_scaling(B, R, verbose=False):
	"""
	Boundary scaling functions of B at resolution R, paired with the symmlet of the same order.

	:return: (x, Y) abscissae and (p, N) function values
	"""
	C = InteriorFilter.symmlet(B.van_moment)
	x = dyadic_rationals(B.support, R)
	Y = boundary_dyadic_values(B, C, R, verbose=verbose)
	return x, Y
