"""
Dyadic rationals on an integer support.

A dyadic rational k/2^R is represented by its integer numerator k together with the
resolution R. Tables of function values are stored densely over the support [a,b],
slot 0 holding the value at a.
"""
import numpy as np

from daubscale.errors import DomainError


def check_resolution(R):
	if R < 0:
		raise DomainError("Resolution has to be non-negative, got %s." % str(R))


def dyadic_positions(support, R):
	"""
	All numerators of the dyadic rationals of resolution R in the support.

	:param support: integer interval (a,b)
	:param R: resolution
	:return: integer array
	>>> dyadic_positions((0, 1), 2)
	array([0, 1, 2, 3, 4])
	>>> dyadic_positions((-1, 1), 1)
	array([-2, -1,  0,  1,  2])
	"""
	check_resolution(R)
	a, b = support
	return np.arange(a * 2 ** R, b * 2 ** R + 1)


def dyadic_rationals(support, R):
	"""
	>>> dyadic_rationals((0, 1), 2)
	array([0.  , 0.25, 0.5 , 0.75, 1.  ])
	"""
	return dyadic_positions(support, R) / 2. ** R


def positions_at_level(support, R, L):
	"""
	Numerators (at resolution R) of the dyadic rationals that appear first at level L.

	Level 0 are the integers, level L >= 1 the odd multiples of 2^-L.

	:param support: integer interval (a,b)
	:param R: resolution
	:param L: level, 0 <= L <= R
	:return: integer array
	>>> positions_at_level((0, 1), 2, 0)
	array([0, 4])
	>>> positions_at_level((0, 1), 2, 1)
	array([2])
	>>> positions_at_level((0, 1), 2, 2)
	array([1, 3])
	"""
	check_resolution(R)
	if L < 0 or L > R:
		raise DomainError("Level %s is not in 0..%s." % (str(L), str(R)))
	a, b = support
	if L == 0:
		return np.arange(a, b + 1) * 2 ** R
	odd = np.arange(a * 2 ** L + 1, b * 2 ** L, 2)
	return odd * 2 ** (R - L)


def index_of(position, support, R=0):
	"""
	Storage slot of a numerator at resolution R.

	>>> index_of(0, (-1, 2), 1)
	2
	"""
	return position - support[0] * 2 ** R


def is_inside(position, support, R=0):
	"""
	>>> is_inside(4, (0, 1), 2)
	True
	>>> is_inside(-1, (0, 1), 2)
	False
	"""
	a, b = support
	return a * 2 ** R <= position <= b * 2 ** R


def integers(support):
	"""
	Integers of the support other than 0, ordered from the outer edge inward.

	:param support: integer interval (a,b) with a == 0 or b == 0
	>>> integers((0, 3))
	[3, 2, 1]
	>>> integers((-3, 0))
	[-3, -2, -1]
	"""
	a, b = support
	if b > 0:
		return list(range(b, 0, -1))
	return list(range(a, 0))
