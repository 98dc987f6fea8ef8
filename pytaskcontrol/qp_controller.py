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

from numpy import array, dot, eye
from warnings import warn

from .constraints import ConstraintSet
from .controller import KinematicController, DEFAULT_STABILITY_THRESHOLD
from .exceptions import DimensionMismatch, FeedforwardNotImplementedWarning
from .optim import DEFAULT_SOLVER, solve_qp


DEFAULT_DAMPING = 1e-3


class TaskspaceQPController(KinematicController):

    """
    Control law based on quadratic programming, for objectives expressed with
    the task Jacobian and the task error.

    At each call, the control signal :math:`u` is the solution of:

    .. math::

        \\mathrm{minimize} \\ & (1/2) u^T H u + f^T u \\\\
        \\mathrm{subject\\ to} \\ & A u \\leq b \\\\
            & A_{eq} u = b_{eq}

    where :math:`H` and :math:`f` are computed by the subclass from the task
    Jacobian :math:`J` and the task error :math:`e = x - x_d`.

    Parameters
    ----------
    kinematics : Kinematics
        Model providing the task variable and task Jacobian.
    gain : scalar, optional
        Proportional feedback gain.
    stability_threshold : scalar, optional
        Error variation below which the closed loop is considered stable.
    solver : string, optional
        QP solver, either 'quadprog' (default) or 'cvxopt'.

    Attributes
    ----------
    constraints : ConstraintSet
        Equality and inequality constraints applied at the next call.
    solver : string
        QP solver used to compute control signals.
    """

    def __init__(self, kinematics, gain=None,
                 stability_threshold=DEFAULT_STABILITY_THRESHOLD,
                 solver=DEFAULT_SOLVER):
        super(TaskspaceQPController, self).__init__(
            kinematics, gain, stability_threshold)
        self.constraints = ConstraintSet()
        self.solver = solver

    def compute_objective_symmetric_matrix(self, J, task_error):
        """
        Compute the matrix :math:`H` of the objective function.

        Parameters
        ----------
        J : array, shape=(m, n)
            Task Jacobian.
        task_error : array, shape=(m,)
            Task error.

        Returns
        -------
        H : array, shape=(n, n)
            Symmetric matrix of the quadratic cost.
        """
        raise NotImplementedError("QP objective matrix not implemented")

    def compute_objective_linear_component(self, J, task_error):
        """
        Compute the vector :math:`f` of the objective function.

        Parameters
        ----------
        J : array, shape=(m, n)
            Task Jacobian.
        task_error : array, shape=(m,)
            Task error.

        Returns
        -------
        f : array, shape=(n,)
            Linear component of the cost.
        """
        raise NotImplementedError("QP objective vector not implemented")

    def set_equality_constraint(self, Aeq, beq):
        """
        Set the constraint :math:`A_{eq} u = b_{eq}` on the control input,
        replacing any previous equality constraint.

        Parameters
        ----------
        Aeq : array, shape=(meq, n)
            Equality matrix.
        beq : array, shape=(meq,)
            Equality vector.
        """
        self.constraints.set_equality(Aeq, beq)

    def set_inequality_constraint(self, A, b):
        """
        Set the constraint :math:`A u \\leq b` on the control input,
        replacing any previous inequality constraint.

        Parameters
        ----------
        A : array, shape=(m, n)
            Inequality matrix.
        b : array, shape=(m,)
            Inequality vector.
        """
        self.constraints.set_inequality(A, b)

    def compute_setpoint_control_signal(self, q, task_reference):
        """
        Compute the control signal regulating the task toward a setpoint.

        Parameters
        ----------
        q : array
            Joint configuration.
        task_reference : array
            Desired value of the task variable.

        Returns
        -------
        u : array or None
            Control signal, or ``None`` if the controller is not set.

        Raises
        ------
        DimensionMismatch
            If the objective or the constraints do not match the number of
            columns of the task Jacobian.
        InfeasibleQP
            If the constraints admit no feasible control signal. The state of
            the controller is left unchanged.
        UnboundedQP
            If the objective is not bounded below.
        """
        if not self.is_set():
            return None
        task_variable = self.get_task_variable(q)
        J = self.get_jacobian(q)
        task_reference = self.get_task_reference(task_reference, task_variable)
        task_error = task_variable - task_reference
        n = J.shape[1]
        A, b, Aeq, beq = self.constraints.as_qp_arguments(n)
        H = array(self.compute_objective_symmetric_matrix(J, task_error),
                  dtype=float)
        f = array(self.compute_objective_linear_component(J, task_error),
                  dtype=float).flatten()
        if H.shape != (n, n):
            raise DimensionMismatch(
                'H', "has shape %s, expected (%d, %d)" % (str(H.shape), n, n))
        if f.shape != (n,):
            raise DimensionMismatch(
                'f', "has %d entries, expected %d" % (f.size, n))
        u = solve_qp(H, f, A, b, Aeq, beq, solver=self.solver)
        self._update_state(task_error, u)
        return u

    def compute_tracking_control_signal(self, q, task_reference,
                                        feedforward=None):
        """
        Compute the control signal tracking a task trajectory.

        Parameters
        ----------
        q : array
            Joint configuration.
        task_reference : array
            Current value of the task trajectory.
        feedforward : array, optional
            Trajectory derivative. Ignored for now.

        Returns
        -------
        u : array or None
            Setpoint control signal toward ``task_reference``.

        Note
        ----
        Only setpoint control is implemented: this function issues a
        :class:`FeedforwardNotImplementedWarning` and returns the output of
        :func:`compute_setpoint_control_signal`.
        """
        warn("Only setpoint control is currently implemented",
             FeedforwardNotImplementedWarning, stacklevel=2)
        return self.compute_setpoint_control_signal(q, task_reference)


class ClassicQPController(TaskspaceQPController):

    """
    QP controller tracking the task with damped least squares.

    The control signal minimizes

    .. math::

        (1/2) \\| J u + \\lambda e \\|^2 + (1/2) \\mu \\| u \\|^2

    where :math:`\\lambda` is the gain and :math:`\\mu` the damping, subject
    to the controller constraints.

    Parameters
    ----------
    kinematics : Kinematics
        Model providing the task variable and task Jacobian.
    gain : scalar, optional
        Proportional feedback gain.
    damping : scalar, optional
        Weight of the velocity regularization. This damping improves numerical
        behavior near singularities, but slows down convergence when its value
        is too high.
    stability_threshold : scalar, optional
        Error variation below which the closed loop is considered stable.
    solver : string, optional
        QP solver, either 'quadprog' (default) or 'cvxopt'.
    """

    def __init__(self, kinematics, gain=None, damping=DEFAULT_DAMPING,
                 stability_threshold=DEFAULT_STABILITY_THRESHOLD,
                 solver=DEFAULT_SOLVER):
        super(ClassicQPController, self).__init__(
            kinematics, gain, stability_threshold, solver)
        self.damping = damping

    def set_damping(self, damping):
        """
        Set the weight of the velocity regularization.

        Parameters
        ----------
        damping : scalar
            New damping, non-negative.
        """
        assert damping >= 0., "damping should be non-negative"
        self.damping = damping

    def compute_objective_symmetric_matrix(self, J, task_error):
        n = J.shape[1]
        return dot(J.T, J) + self.damping * eye(n)

    def compute_objective_linear_component(self, J, task_error):
        return self.gain * dot(J.T, task_error)
