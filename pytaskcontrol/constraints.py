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

from numpy import array

from .exceptions import DimensionMismatch


def _check_pair(names, pair, n):
    mat_name, vec_name = names
    M, v = array(pair[0], dtype=float), array(pair[1], dtype=float)
    if M.size == 0 and v.size == 0:  # empty block, same as no constraint
        return None, None
    if M.ndim != 2:
        raise DimensionMismatch(
            mat_name, "expected a matrix, got an array of shape %s" % (
                str(M.shape)))
    if M.shape[1] != n:
        raise DimensionMismatch(
            mat_name, "has %d columns but the control input has dimension %d"
            % (M.shape[1], n))
    if v.size != M.shape[0]:
        raise DimensionMismatch(
            vec_name, "has %d rows but %s has %d rows" % (
                v.size, mat_name, M.shape[0]))
    return M, v.flatten()


class ConstraintSet(object):

    """
    Linear constraints on the control input :math:`u`.

    Holds at most one equality constraint :math:`A_{eq} u = b_{eq}` and one
    inequality constraint :math:`A u \\leq b`. Setting a constraint replaces
    the previous one of the same kind.

    Attributes
    ----------
    equality : pair of arrays or None
        Pair ``(Aeq, beq)``, or ``None`` when there is no equality constraint.
    inequality : pair of arrays or None
        Pair ``(A, b)``, or ``None`` when there is no inequality constraint.
    """

    def __init__(self):
        self.equality = None
        self.inequality = None

    def clear(self):
        """
        Remove both equality and inequality constraints.
        """
        self.equality = None
        self.inequality = None

    def set_equality(self, Aeq, beq):
        """
        Set the equality constraint :math:`A_{eq} u = b_{eq}`.

        Parameters
        ----------
        Aeq : array, shape=(meq, n)
            Equality matrix.
        beq : array, shape=(meq,)
            Equality vector.
        """
        self.equality = (Aeq, beq)

    def set_inequality(self, A, b):
        """
        Set the inequality constraint :math:`A u \\leq b`.

        Parameters
        ----------
        A : array, shape=(m, n)
            Inequality matrix.
        b : array, shape=(m,)
            Inequality vector.
        """
        self.inequality = (A, b)

    def as_qp_arguments(self, n):
        """
        Get constraint matrices in the order expected by QP solvers.

        Parameters
        ----------
        n : integer
            Dimension of the control input.

        Returns
        -------
        A : array or None
            Inequality matrix.
        b : array or None
            Inequality vector.
        Aeq : array or None
            Equality matrix.
        beq : array or None
            Equality vector.

        Raises
        ------
        DimensionMismatch
            If constraints are inconsistent with dimension `n`.
        """
        A, b, Aeq, beq = None, None, None, None
        if self.inequality is not None:
            A, b = _check_pair(('A', 'b'), self.inequality, n)
        if self.equality is not None:
            Aeq, beq = _check_pair(('Aeq', 'beq'), self.equality, n)
        return A, b, Aeq, beq
