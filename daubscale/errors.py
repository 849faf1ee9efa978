import numpy as np


class DomainError(ValueError):
	"""
	Raised for a resolution or level outside of its admissible range.
	"""
	pass


class FilterMismatchError(AssertionError):
	"""
	Raised when a boundary filter is paired with an interior filter of a different family.
	"""
	pass


class DegenerateRefinementEquation(np.linalg.LinAlgError):
	"""
	Raised when the refinement equation has no unique fixed point.
	"""
	pass
