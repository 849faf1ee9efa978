import warnings
from abc import ABC, abstractmethod
from enum import Enum

import numpy as np
import pywt

from daubscale.constants import SQRT2, TAP_SUM_TOL


class Side(Enum):
	LEFT = 'L'
	RIGHT = 'R'


class Filter(ABC):
	"""
	Coefficients of a two-scale equation together with the support of its solution.
	"""

	@abstractmethod
	def taps(self, index=0):
		"""
		Ordered coefficients of the scaling function with the given index.
		"""
		raise AttributeError("Only derived classes can call this method.")

	@property
	def support(self):
		return self._support

	@property
	def van_moment(self):
		return self._van_moment

	@property
	def side(self):
		return None


class InteriorFilter(Filter):
	"""
	Filter of the interior scaling function phi(x) = sqrt(2) sum_j h_j phi(2x - a - j),
	where [a,b] is the support.
	"""

	def __init__(self, taps, support=None):
		self._taps = np.asarray(taps, dtype=float).reshape(-1)
		n = self._taps.shape[0]
		if n < 2 or n % 2 == 1:
			raise ValueError("An interior filter needs an even, positive number of taps, got %d." % n)

		if support is None:
			support = (0, n - 1)
		a, b = int(support[0]), int(support[1])
		if b - a != n - 1:
			raise ValueError("Support (%d,%d) does not fit %d taps." % (a, b, n))

		self._support = (a, b)
		self._van_moment = n // 2

		total = np.sum(self._taps)
		if np.abs(total - SQRT2) > TAP_SUM_TOL:
			warnings.warn("Filter taps sum to %f instead of sqrt(2); the refinement equation "
						  "is unlikely to have a fixed point." % total)

	@classmethod
	def daubechies(cls, p):
		"""
		Daubechies filter with p vanishing moments on (0, 2p-1).
		"""
		return cls(pywt.Wavelet('db%d' % p).rec_lo)

	@classmethod
	def symmlet(cls, p):
		"""
		Least asymmetric filter with p vanishing moments on (1-p, p).
		"""
		name = 'haar' if p == 1 else 'sym%d' % p
		return cls(pywt.Wavelet(name).rec_lo, support=(1 - p, p))

	def taps(self, index=0):
		return self._taps

	def __len__(self):
		return self._taps.shape[0]

	def __repr__(self):
		return "InteriorFilter(p=%d, support=%s)" % (self.van_moment, str(self.support))


class BoundaryFilter(Filter):
	"""
	Filters of the p boundary scaling functions on one side of an interval.

	The k'th row has p + 2k + 1 taps: the first p multiply the boundary functions at 2x,
	the remaining 2k + 1 multiply interior translates.
	"""

	def __init__(self, coefficients, side):
		self._side = Side(side.upper() if isinstance(side, str) else side)
		self._coefficients = [np.asarray(c, dtype=float).reshape(-1) for c in coefficients]

		p = len(self._coefficients)
		if p == 0:
			raise ValueError("A boundary filter needs at least one row of coefficients.")
		for k, row in enumerate(self._coefficients):
			if row.shape[0] != p + 2 * k + 1:
				raise ValueError("Row %d of a boundary filter with p = %d needs %d taps, got %d."
								 % (k, p, p + 2 * k + 1, row.shape[0]))

		self._van_moment = p
		if self._side == Side.LEFT:
			self._support = (0, 2 * p - 1)
		else:
			self._support = (1 - 2 * p, 0)

	@classmethod
	def from_text(cls, path, side):
		"""
		Reads one row of whitespace separated taps per line; '#' starts a comment.
		"""
		rows = []
		with open(path, 'r') as f:
			for line in f:
				line = line.split('#')[0].strip()
				if line:
					rows.append([float(v) for v in line.split()])
		return cls(rows, side)

	def taps(self, index=0):
		return self._coefficients[index]

	@property
	def side(self):
		return self._side

	def __len__(self):
		return self._van_moment

	def __repr__(self):
		return "BoundaryFilter(p=%d, side=%s)" % (self.van_moment, self.side.value)
