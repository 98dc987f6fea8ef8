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

from numpy import array, dot, zeros


class Kinematics(object):

    """
    Kinematic model providing a task variable and its Jacobian.

    Subclasses implement ``_task_variable`` and ``_jacobian``. Both receive the
    joint configuration and, for composite tasks, a ``primitive`` selecting
    the sub-task (for instance which plane or line of the task to use).

    Note
    ----
    The task Jacobian maps joint velocities to task-variable rates:
    :math:`\\dot{x} = J(q) \\dot{q}`.
    """

    def _task_variable(self, q, primitive=None):
        raise NotImplementedError("Task variable not implemented")

    def _jacobian(self, q, primitive=None):
        raise NotImplementedError("Task Jacobian not implemented")

    def task_variable(self, q, primitive=None):
        """
        Compute the task variable at a given configuration.

        Parameters
        ----------
        q : array
            Joint configuration.
        primitive : object, optional
            Sub-task selector for composite tasks.

        Returns
        -------
        x : array
            Task variable.
        """
        if primitive is None:
            return self._task_variable(q)
        return self._task_variable(q, primitive)

    def jacobian(self, q, primitive=None):
        """
        Compute the task Jacobian at a given configuration.

        Parameters
        ----------
        q : array
            Joint configuration.
        primitive : object, optional
            Sub-task selector for composite tasks.

        Returns
        -------
        J : array, shape=(m, n)
            Task Jacobian, where `n` is the number of joints.
        """
        if primitive is None:
            return self._jacobian(q)
        return self._jacobian(q, primitive)


class LinearKinematics(Kinematics):

    """
    Task variable that is an affine function :math:`x = J q + x_0` of the
    joint configuration.

    Parameters
    ----------
    J : array, shape=(m, n)
        Constant task Jacobian.
    offset : array, shape=(m,), optional
        Task variable at the zero configuration.
    """

    def __init__(self, J, offset=None):
        J = array(J, dtype=float)
        if J.ndim == 1:
            J = J.reshape((1, -1))
        self.J = J
        self.offset = zeros(J.shape[0]) if offset is None else \
            array(offset, dtype=float)

    @property
    def nb_dofs(self):
        return self.J.shape[1]

    def _task_variable(self, q, primitive=None):
        if primitive is not None:
            raise ValueError("linear kinematics have no primitive")
        return dot(self.J, q) + self.offset

    def _jacobian(self, q, primitive=None):
        if primitive is not None:
            raise ValueError("linear kinematics have no primitive")
        return self.J.copy()
