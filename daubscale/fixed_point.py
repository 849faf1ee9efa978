import numpy as np
import scipy.linalg

from daubscale.constants import EIGENVALUE_TOL, RANK_TOL, IMAG_TOL
from daubscale.errors import DegenerateRefinementEquation


class SolverParams():

	defaults = {'tol': EIGENVALUE_TOL, 'rank_tol': RANK_TOL, 'imag_tol': IMAG_TOL}

	def __init__(self, param_dict):
		for key in self.defaults:
			setattr(self, key, self.defaults[key])
		for key in param_dict:
			if key not in self.defaults:
				raise AttributeError("Unknown solver parameter %s" % str(key))
			setattr(self, key, float(param_dict[key]))


class FixedPointSolver():
	"""
	Extracts the eigenvector of eigenvalue 1 of a refinement matrix.

	The eigen decomposition is delegated to a backend, a callable returning
	(eigenvalues, eigenvectors) with the eigenvectors in the columns, as scipy.linalg.eig does.
	"""

	def __init__(self, backend=None, **kwargs):
		self.backend = backend if backend is not None else scipy.linalg.eig
		self.params = SolverParams(kwargs)

	def eigensystem(self, matrix):
		values, vectors = self.backend(np.asarray(matrix, dtype=float))
		return np.asarray(values), np.asarray(vectors).reshape(len(values), -1)

	def solve(self, matrix):
		"""
		:param matrix: square numpy array
		:return: real eigenvector of eigenvalue 1 with unit norm; its largest entry is positive
		"""
		return self.fixed_point(*self.eigensystem(matrix))

	def fixed_point(self, values, vectors):
		"""
		Eigenvector of eigenvalue 1 from an eigensystem already computed.
		"""
		mask = np.abs(values - 1.) < self.params.tol
		if not np.any(mask):
			raise DegenerateRefinementEquation("No eigenvalue 1 found, eigenvalues are %s." % str(values))

		candidates = vectors[:, mask]
		dim = np.linalg.matrix_rank(candidates, tol=self.params.rank_tol)
		if dim != 1:
			raise DegenerateRefinementEquation("The eigenspace of eigenvalue 1 has dimension %d." % dim)

		v = candidates[:, 0]
		v = v / np.linalg.norm(v)
		# a complex eigenvector of a real matrix is real up to a phase
		v = v * np.exp(-1j * np.angle(v[np.argmax(np.abs(v))]))
		if np.max(np.abs(np.imag(v))) > self.params.imag_tol:
			raise DegenerateRefinementEquation("The eigenvector of eigenvalue 1 is not real.")
		return np.real(v)

	def left_solve(self, matrix):
		return self.solve(np.asarray(matrix, dtype=float).T)

	def subdominant_radius(self, matrix=None, values=None):
		"""
		Largest modulus among the eigenvalues different from 1.

		:param matrix: square numpy array, ignored when its eigenvalues are given
		:param values: eigenvalues of the matrix
		"""
		if values is None:
			values, _ = self.eigensystem(matrix)
		values = np.asarray(values)
		rest = values[np.abs(values - 1.) >= self.params.tol]
		if rest.shape[0] == 0:
			return 0.
		return float(np.max(np.abs(rest)))


def solve_eigenvalue1(matrix, solver=None):
	"""
	>>> solve_eigenvalue1(np.array([[1., 0.], [0., 0.5]]))
	array([1., 0.])
	"""
	if solver is None:
		solver = FixedPointSolver()
	return solver.solve(matrix)
