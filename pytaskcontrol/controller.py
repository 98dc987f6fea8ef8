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

from numpy import array, zeros

from .exceptions import DimensionMismatch
from .misc import info, norm, warn


DEFAULT_GAIN = 1.
DEFAULT_STABILITY_THRESHOLD = 1e-3


class KinematicController(object):

    """
    Base class of task-space kinematic controllers.

    Parameters
    ----------
    kinematics : Kinematics
        Model providing the task variable and task Jacobian.
    gain : scalar, optional
        Proportional feedback gain.
    stability_threshold : scalar, optional
        Error variation below which the closed loop is considered stable.

    Attributes
    ----------
    gain : scalar
        Proportional feedback gain.
    is_stable : bool
        Set once the task error has stopped changing. This flag is a latch: no
        control-signal computation sets it back to False.
    kinematics : Kinematics
        Model providing the task variable and task Jacobian.
    last_control_signal : array
        Control signal returned by the last successful computation, or
        ``None`` before the first one.
    last_error_signal : array
        Task error of the last successful computation, or ``None`` before the
        first one.
    stability_threshold : scalar
        Error variation below which the closed loop is considered stable.
    verbosity : integer
        Print the task-error norm at each computation when at least 2, and
        announce the stable region when at least 1.
    """

    def __init__(self, kinematics, gain=None,
                 stability_threshold=DEFAULT_STABILITY_THRESHOLD):
        if gain is None:
            gain = DEFAULT_GAIN
        self.gain = gain
        self.is_stable = False
        self.kinematics = kinematics
        self.last_control_signal = None
        self.last_error_signal = None
        self.stability_threshold = stability_threshold
        self.verbosity = 0

    def set_gain(self, gain):
        """
        Set the proportional feedback gain.

        Parameters
        ----------
        gain : scalar
            New gain, strictly positive.
        """
        assert gain > 0., "controller gain should be positive"
        self.gain = gain

    def set_stability_threshold(self, threshold):
        """
        Set the error variation below which the loop is considered stable.

        Parameters
        ----------
        threshold : scalar
            New threshold, strictly positive.
        """
        assert threshold > 0., "stability threshold should be positive"
        self.stability_threshold = threshold

    def is_set(self):
        """
        Check whether the controller has a kinematic model and a gain.

        Returns
        -------
        is_set : bool
            True if control signals can be computed.
        """
        return self.kinematics is not None and self.gain is not None \
            and self.gain > 0.

    def get_task_variable(self, q, primitive=None):
        if primitive is None:
            x = self.kinematics.task_variable(q)
        else:  # composite task
            x = self.kinematics.task_variable(q, primitive)
        return array(x, dtype=float).flatten()

    def get_jacobian(self, q, primitive=None):
        if primitive is None:
            J = array(self.kinematics.jacobian(q), dtype=float)
        else:  # composite task
            J = array(self.kinematics.jacobian(q, primitive), dtype=float)
        return J.reshape((1, -1)) if J.ndim == 1 else J

    def get_task_reference(self, task_reference, task_variable):
        """
        Flatten a task reference and check it against the task variable.

        Parameters
        ----------
        task_reference : array
            Desired value of the task variable, as a vector or a column.
        task_variable : array
            Current value of the task variable.

        Returns
        -------
        reference : array
            Task reference with the same shape as `task_variable`.

        Raises
        ------
        DimensionMismatch
            If the reference and the task variable have different sizes.
        """
        reference = array(task_reference, dtype=float).flatten()
        if reference.size != task_variable.size:
            raise DimensionMismatch(
                'task_reference', "has %d entries but the task variable has "
                "%d" % (reference.size, task_variable.size))
        return reference.reshape(task_variable.shape)

    def system_reached_stable_region(self):
        """
        Check whether the closed-loop system has reached a stable region.

        Returns
        -------
        is_stable : bool
            Value of the stability latch.
        """
        return self.is_stable

    def verify_stability(self, task_error):
        """
        Verify if the closed-loop system has reached a stable region.

        The system is considered stable once the task error changes by less
        than ``stability_threshold`` between two consecutive calls.

        Parameters
        ----------
        task_error : array
            Current task error.

        Notes
        -----
        Before the first control signal is computed, the previous error is
        taken to be zero. The first call therefore latches the flag only when
        the initial task error is already below the threshold. The same holds
        when the error changes dimension, for instance after switching task
        primitive.
        """
        task_error = array(task_error, dtype=float)
        last_error = self.last_error_signal
        if last_error is not None and last_error.shape != task_error.shape:
            warn("task error changed shape from %s to %s" % (
                str(last_error.shape), str(task_error.shape)))
            last_error = None
        if last_error is None:
            last_error = zeros(task_error.shape)
        if norm((last_error - task_error).flatten()) < \
                self.stability_threshold:
            if not self.is_stable and self.verbosity >= 1:
                info("%s reached a stable region" % type(self).__name__)
            self.is_stable = True

    def _update_state(self, task_error, u):
        if self.verbosity >= 2:
            info("task error norm: %.3e" % norm(task_error))
        self.verify_stability(task_error)
        self.last_control_signal = array(u)
        self.last_error_signal = array(task_error)
