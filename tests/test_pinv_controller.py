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

import unittest
import os
import sys

from numpy import allclose, array, dot, eye, zeros
from numpy.linalg import inv
from numpy.random import RandomState

try:
    import pytaskcontrol
except ImportError:
    script_path = os.path.realpath(__file__)
    sys.path.append(os.path.dirname(script_path) + '/../')
    import pytaskcontrol

from pytaskcontrol import DimensionMismatch
from pytaskcontrol import Kinematics
from pytaskcontrol import LinearKinematics
from pytaskcontrol import PseudoInverseController


class PlaneKinematics(Kinematics):

    """
    Composite task made of one linear task per primitive.
    """

    def __init__(self):
        self.primitives = {
            None: array([[1., 0., 0.]]),
            'xy': array([[1., 0., 0.], [0., 1., 0.]]),
            'z': array([[0., 0., 1.]]),
        }
        self.calls = []

    def _task_variable(self, q, primitive=None):
        self.calls.append(('task_variable', primitive))
        return dot(self.primitives[primitive], q)

    def _jacobian(self, q, primitive=None):
        self.calls.append(('jacobian', primitive))
        return self.primitives[primitive]


class TestPseudoInverseController(unittest.TestCase):

    """
    Test the pseudo-inverse control law.
    """

    def test_identity_jacobian(self):
        controller = PseudoInverseController(LinearKinematics(eye(2)), gain=1.)
        u = controller.compute_control_signal(zeros(2), [1., 1.])
        self.assertTrue(allclose(u, [1., 1.]))

    def test_error_sign(self):
        controller = PseudoInverseController(LinearKinematics(eye(2)))
        controller.compute_control_signal(zeros(2), [1., -2.])
        self.assertTrue(allclose(controller.last_error_signal, [1., -2.]))

    def test_square_jacobian_inverse(self):
        rng = RandomState(7)
        J = rng.randn(4, 4) + 4. * eye(4)
        kinematics = LinearKinematics(J, offset=rng.randn(4))
        controller = PseudoInverseController(kinematics, gain=0.3)
        q = rng.randn(4)
        ref = rng.randn(4)
        u = controller.compute_control_signal(q, ref)
        e = ref - kinematics.task_variable(q)
        self.assertTrue(allclose(u, dot(inv(J), 0.3 * e)))

    def test_redundant_minimum_norm(self):
        rng = RandomState(3)
        J = rng.randn(2, 6)
        controller = PseudoInverseController(LinearKinematics(J), gain=2.)
        ref = rng.randn(2)
        u = controller.compute_control_signal(zeros(6), ref)
        self.assertTrue(allclose(dot(J, u), 2. * ref))
        # minimum-norm solutions lie in the row space of J
        coeffs = dot(inv(dot(J, J.T)), dot(J, u))
        self.assertTrue(allclose(dot(J.T, coeffs), u))

    def test_primitive(self):
        kinematics = PlaneKinematics()
        controller = PseudoInverseController(kinematics)
        q = array([0.1, 0.2, 0.3])
        u = controller.compute_control_signal(q, [1., 1.], 'xy')
        self.assertTrue(allclose(u, [0.9, 0.8, 0.]))
        self.assertEqual(
            kinematics.calls, [('task_variable', 'xy'), ('jacobian', 'xy')])

    def test_default_primitive(self):
        kinematics = PlaneKinematics()
        controller = PseudoInverseController(kinematics)
        u = controller.compute_control_signal(zeros(3), [0.5])
        self.assertTrue(allclose(u, [0.5, 0., 0.]))
        self.assertEqual(
            kinematics.calls, [('task_variable', None), ('jacobian', None)])

    def test_not_set(self):
        controller = PseudoInverseController(LinearKinematics(eye(2)))
        controller.gain = 0.
        self.assertIsNone(
            controller.compute_control_signal(zeros(2), [1., 1.]))
        self.assertIsNone(controller.last_control_signal)
        self.assertIsNone(controller.last_error_signal)

    def test_column_reference(self):
        controller = PseudoInverseController(LinearKinematics(eye(2)))
        u = controller.compute_control_signal(zeros(2), array([[1.], [1.]]))
        self.assertEqual(u.shape, (2,))
        self.assertTrue(allclose(u, [1., 1.]))
        self.assertEqual(controller.last_control_signal.shape, (2,))
        self.assertEqual(controller.last_error_signal.shape, (2,))

    def test_reference_size(self):
        controller = PseudoInverseController(LinearKinematics(eye(2)))
        with self.assertRaises(DimensionMismatch) as cm:
            controller.compute_control_signal(zeros(2), [1., 1., 1.])
        self.assertEqual(cm.exception.name, 'task_reference')
        self.assertIsNone(controller.last_control_signal)
        self.assertIsNone(controller.last_error_signal)

    def test_convergence(self):
        rng = RandomState(11)
        kinematics = LinearKinematics(rng.randn(3, 7))
        controller = PseudoInverseController(kinematics, gain=0.5)
        q = zeros(7)
        ref = rng.randn(3)
        while not controller.is_stable:
            q = q + controller.compute_control_signal(q, ref)
        self.assertTrue(allclose(kinematics.task_variable(q), ref, atol=1e-2))


if __name__ == "__main__":
    unittest.main()
