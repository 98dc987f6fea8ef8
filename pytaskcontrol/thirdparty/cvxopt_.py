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

import cvxopt
import cvxopt.solvers

from cvxopt.solvers import lp, qp
from numpy import array, ascontiguousarray, eye, hstack, ones, vstack, zeros

from ..exceptions import InfeasibleQP, OptimumNotFound, UnboundedQP

cvxopt.solvers.options['show_progress'] = False  # disable CVXOPT output


def cvxmat(M):
    """
    Convert a NumPy array to a CVXOPT matrix of doubles.

    Parameters
    ----------
    M : array
        Matrix or vector to convert.
    """
    return cvxopt.matrix(ascontiguousarray(M, dtype=float))


def solve_qp(P, q, G=None, h=None, A=None, b=None, sym_proj=False):
    """
    Solve a quadratic program defined as:

    .. math::

        \\mathrm{minimize} \\ & (1/2) x^T P x + q^T x \\\\
        \\mathrm{subject\\ to} \\ & G x \\leq h \\\\
            & A x = b

    using `CVXOPT
    <http://cvxopt.org/userguide/coneprog.html#quadratic-programming>`_.

    Parameters
    ----------
    P : array, shape=(n, n)
        Symmetric quadratic-cost matrix.
    q : array, shape=(n,)
        Quadratic-cost vector.
    G : array, shape=(m, n), optional
        Linear inequality matrix.
    h : array, shape=(m,), optional
        Linear inequality vector.
    A : array, shape=(meq, n), optional
        Linear equality matrix.
    b : array, shape=(meq,), optional
        Linear equality vector.
    sym_proj : bool, optional
        Set to `True` when the `P` matrix provided is not symmetric.

    Returns
    -------
    x : array, shape=(n,)
        Optimal solution to the QP.

    Raises
    ------
    InfeasibleQP
        If the solver fails and the phase-one LP of :func:`is_feasible`
        finds the constraints inconsistent.
    UnboundedQP
        If the KKT system is singular while the constraints are feasible.
    OptimumNotFound
        For any other failure.

    Note
    ----
    CVXOPT only considers the lower entries of `P`, assuming it is symmetric.
    If that is not the case, set `sym_proj=True` to project it on its
    symmetric part beforehand. Unlike quadprog, CVXOPT accepts positive
    semi-definite cost matrices.
    """
    if sym_proj:
        P = .5 * (P + P.T)
    kwargs = {}
    if G is not None:
        kwargs['G'] = cvxmat(G)
        kwargs['h'] = cvxmat(h)
    if A is not None:
        kwargs['A'] = cvxmat(A)
        kwargs['b'] = cvxmat(b)
    try:
        sol = qp(cvxmat(P), cvxmat(q), **kwargs)
    except (ArithmeticError, ValueError) as e:
        status = str(e)
        sol = None
    else:  # solver returned
        status = sol['status']
        if 'optimal' in status:
            return array(sol['x']).reshape((P.shape[1],))
    feasible = is_feasible(P.shape[1], G, h, A, b)
    if feasible is False:
        raise InfeasibleQP(status)
    elif feasible and sol is None and status.startswith("Rank"):
        # singular KKT system on a feasible set: P is only semi-definite
        raise UnboundedQP(status)
    raise OptimumNotFound(status)


def is_feasible(n, G=None, h=None, A=None, b=None, box=1e6, tol=1e-6):
    """
    Check whether the polyhedron :math:`\\{x \\mid G x \\leq h, A x = b\\}`
    is non-empty, by solving the phase-one linear program:

    .. math::

        \\mathrm{minimize} \\ & s \\\\
        \\mathrm{subject\\ to} \\ & G x - s \\leq h \\\\
            & A x = b \\\\
            & s \\geq 0, \\ -M \\leq x \\leq M

    Parameters
    ----------
    n : integer
        Dimension of :math:`x`.
    G : array, shape=(m, n), optional
        Linear inequality matrix.
    h : array, shape=(m,), optional
        Linear inequality vector.
    A : array, shape=(meq, n), optional
        Linear equality matrix.
    b : array, shape=(meq,), optional
        Linear equality vector.
    box : scalar, optional
        Bound :math:`M` on the coordinates of :math:`x`. It keeps the LP
        matrices full rank, as CVXOPT requires.
    tol : scalar, optional
        Largest inequality violation still counted as feasible.

    Returns
    -------
    feasible : bool or None
        True if the polyhedron is non-empty, False if it is empty, None if the
        LP solver could not decide.
    """
    if G is None and A is None:
        return True
    E, z = eye(n), zeros((n, 1))
    G_rows = [hstack([zeros((1, n)), [[-1.]]]), hstack([+E, z]),
              hstack([-E, z])]
    h_rows = [zeros(1), box * ones(n), box * ones(n)]
    if G is not None:
        G_rows.insert(0, hstack([G, -ones((G.shape[0], 1))]))
        h_rows.insert(0, h)
    c = hstack([zeros(n), 1.])
    args = [cvxmat(c), cvxmat(vstack(G_rows)), cvxmat(hstack(h_rows))]
    if A is not None:
        args.extend([cvxmat(hstack([A, zeros((A.shape[0], 1))])), cvxmat(b)])
    try:
        sol = lp(*args)
    except (ArithmeticError, ValueError):
        return None
    if sol['status'] == 'primal infeasible':
        return False
    elif sol['status'] != 'optimal':
        return None
    return sol['x'][n] <= tol
