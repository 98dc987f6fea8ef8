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

from numpy import dot
from numpy.linalg import pinv

from .controller import KinematicController


class PseudoInverseController(KinematicController):

    """
    Classic control law based on the Jacobian pseudo-inverse and the
    Euclidean task error:

    .. math::

        u = \\lambda J^+ (x_d - x)

    where :math:`J^+` is the Moore-Penrose pseudo-inverse of the task Jacobian
    and :math:`\\lambda` the gain. For redundant manipulators, this is the
    minimum-norm joint velocity realizing the desired task rate.

    Parameters
    ----------
    kinematics : Kinematics
        Model providing the task variable and task Jacobian.
    gain : scalar, optional
        Proportional feedback gain.
    stability_threshold : scalar, optional
        Error variation below which the closed loop is considered stable.

    Note
    ----
    The task error here is ``task_reference - task_variable``, the opposite of
    the error used by :class:`TaskspaceQPController`.
    """

    def compute_control_signal(self, q, task_reference, primitive=None):
        """
        Compute the control signal regulating the task toward a setpoint.

        Parameters
        ----------
        q : array
            Joint configuration.
        task_reference : array
            Desired value of the task variable.
        primitive : object, optional
            Sub-task selector passed to the kinematic model, for instance to
            choose a plane or line in a composite task.

        Returns
        -------
        u : array or None
            Control signal, or ``None`` if the controller is not set.
        """
        if not self.is_set():
            return None
        task_variable = self.get_task_variable(q, primitive)
        J = self.get_jacobian(q, primitive)
        task_reference = self.get_task_reference(task_reference, task_variable)
        task_error = task_reference - task_variable
        u = dot(pinv(J), self.gain * task_error)
        self._update_state(task_error, u)
        return u
