import numpy as np

from daubscale.constants import SQRT2


def build_dilation_matrix(taps):
	"""
	The dyadic dilation matrix D of the filter taps, D[i,j] = sqrt(2) taps[2i - j].

	D maps the values of the scaling function at the integers of its support onto
	themselves, so these values are the eigenvector of eigenvalue 1.

	:param taps: filter coefficients (N,)
	:return: numpy array (N,N)
	>>> np.round(build_dilation_matrix(np.array([1., 1.]) / np.sqrt(2)), 6)
	array([[1., 0.],
	       [0., 1.]])
	"""
	taps = np.asarray(taps, dtype=float).reshape(-1)
	n = taps.shape[0]
	D = np.zeros(shape=(n, n), dtype=float)
	for i in range(n):
		for j in range(n):
			idx = 2 * i - j
			if 0 <= idx < n:
				D[i, j] = SQRT2 * taps[idx]
	return D


def build_boundary_coefficient_matrix(boundary_filter):
	"""
	The first p taps of every boundary filter row, scaled by sqrt(2).

	Row k describes how the k'th boundary scaling function at x depends on the
	boundary scaling functions at 2x.
	"""
	p = boundary_filter.van_moment
	M = np.zeros(shape=(p, p), dtype=float)
	for k in range(p):
		M[k, :] = SQRT2 * boundary_filter.taps(k)[0:p]
	return M
