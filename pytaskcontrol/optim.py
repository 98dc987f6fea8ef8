#!/usr/bin/env python
# -*- coding: utf-8 -*-
#
# Copyright (C) 2019-2020 The pytaskcontrol developers
#
# This file is part of pytaskcontrol.
#
# pytaskcontrol is free software: you can redistribute it and/or modify it
# under the terms of the GNU General Public License as published by the Free
# Software Foundation, either version 3 of the License, or (at your option) any
# later version.
#
# pytaskcontrol is distributed in the hope that it will be useful, but WITHOUT
# ANY WARRANTY; without even the implied warranty of MERCHANTABILITY or FITNESS
# FOR A PARTICULAR PURPOSE. See the GNU General Public License for more details.
#
# You should have received a copy of the GNU General Public License along with
# pytaskcontrol. If not, see <http://www.gnu.org/licenses/>.

from numpy import asarray

from .thirdparty.cvxopt_ import solve_qp as cvxopt_solve_qp
from .thirdparty.quadprog_ import solve_qp as quadprog_solve_qp


DEFAULT_SOLVER = 'quadprog'


def _as_block(M, ndim):
    if M is None:
        return None
    M = asarray(M, dtype=float)
    if M.size == 0:  # empty block stands for an absent constraint
        return None
    if ndim == 1:
        return M.flatten()
    return M.reshape((1, -1)) if M.ndim == 1 else M


def solve_qp(P, q, G=None, h=None, A=None, b=None, solver=DEFAULT_SOLVER,
             sym_proj=False):
    """
    Solve a Quadratic Program defined as:

    .. math::

        \\mathrm{minimize} \\ & (1/2) x^T P x + q^T x \\\\
        \\mathrm{subject\\ to} \\ & G x \\leq h \\\\
            & A x = b

    Parameters
    ----------
    P : array, shape=(n, n)
        Primal quadratic cost matrix.
    q : array, shape=(n,)
        Primal quadratic cost vector.
    G : array, shape=(m, n), optional
        Linear inequality constraint matrix.
    h : array, shape=(m,), optional
        Linear inequality constraint vector.
    A : array, shape=(meq, n), optional
        Linear equality constraint matrix.
    b : array, shape=(meq,), optional
        Linear equality constraint vector.
    solver : string, optional
        Name of the QP solver to use, either 'quadprog' (default) or 'cvxopt'.
    sym_proj : bool, optional
        Set to `True` when the `P` matrix provided is not symmetric.

    Returns
    -------
    x : array, shape=(n,)
        Optimal solution to the QP.

    Raises
    ------
    InfeasibleQP
        If the constraints admit no feasible point.
    UnboundedQP
        If the objective is unbounded or, with quadprog, if `P` is not
        positive definite.
    OptimumNotFound
        If the solver fails for any other reason.

    Note
    ----
    Empty arrays are accepted for `G, h` and `A, b` and are treated as absent
    constraints.
    """
    P = asarray(P, dtype=float)
    q = asarray(q, dtype=float).flatten()
    G, h = _as_block(G, 2), _as_block(h, 1)
    A, b = _as_block(A, 2), _as_block(b, 1)
    if G is None:
        h = None
    if A is None:
        b = None
    if solver == 'quadprog':
        return quadprog_solve_qp(P, q, G, h, A, b, sym_proj=sym_proj)
    elif solver == 'cvxopt':
        return cvxopt_solve_qp(P, q, G, h, A, b, sym_proj=sym_proj)
    raise ValueError("QP solver '%s' not recognized" % solver)


__all__ = ['DEFAULT_SOLVER', 'solve_qp']
