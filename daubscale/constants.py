import numpy as np

SQRT2 = np.sqrt(2.)

# defaults of the fixed point solver, see fixed_point.SolverParams
EIGENVALUE_TOL = 1e-8
RANK_TOL = 1e-6
IMAG_TOL = 1e-10

# interior taps are expected to sum to sqrt(2)
TAP_SUM_TOL = 1e-6

# the fixed point of the dilation matrix is divided by its sum
ZERO_SUM_TOL = 1e-12
