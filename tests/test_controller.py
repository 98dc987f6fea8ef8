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

from numpy import array, eye, zeros

try:
    import pytaskcontrol
except ImportError:
    script_path = os.path.realpath(__file__)
    sys.path.append(os.path.dirname(script_path) + '/../')
    import pytaskcontrol

from pytaskcontrol import KinematicController
from pytaskcontrol import LinearKinematics
from pytaskcontrol import PseudoInverseController


class TestStability(unittest.TestCase):

    """
    Test the stability latch of kinematic controllers.
    """

    def setUp(self):
        self.controller = KinematicController(
            LinearKinematics(eye(2)), stability_threshold=1e-3)

    def test_initial_state(self):
        self.assertFalse(self.controller.is_stable)
        self.assertIsNone(self.controller.last_error_signal)
        self.assertIsNone(self.controller.last_control_signal)

    def test_first_call_large_error(self):
        self.controller.verify_stability(array([1., 1.]))
        self.assertFalse(self.controller.is_stable)

    def test_first_call_small_error(self):
        self.controller.verify_stability(array([1e-4, 0.]))
        self.assertTrue(self.controller.is_stable)

    def test_threshold(self):
        self.controller.last_error_signal = array([1., 1.])
        self.controller.verify_stability(array([1., 1.1]))
        self.assertFalse(self.controller.is_stable)
        self.controller.verify_stability(array([1., 1.0005]))
        self.assertTrue(self.controller.is_stable)

    def test_latch(self):
        self.controller.last_error_signal = array([1., 1.])
        self.controller.verify_stability(array([1., 1.]))
        self.assertTrue(self.controller.is_stable)
        for e in [array([10., 0.]), array([-5., 3.]), array([1e3, 1e3])]:
            self.controller.verify_stability(e)
            self.assertTrue(self.controller.is_stable)
            self.assertTrue(self.controller.system_reached_stable_region())

    def test_latch_through_control(self):
        controller = PseudoInverseController(LinearKinematics(eye(2)))
        q = zeros(2)
        controller.compute_control_signal(q, [1., 1.])
        self.assertFalse(controller.is_stable)
        controller.compute_control_signal(q, [1., 1.])
        self.assertTrue(controller.is_stable)
        controller.compute_control_signal(q, [-3., 4.])
        self.assertTrue(controller.is_stable)

    def test_error_shape_change(self):
        self.controller.last_error_signal = array([5., 5.])
        self.controller.verify_stability(array([1e-4]))
        self.assertTrue(self.controller.is_stable)

    def test_verify_does_not_record(self):
        self.controller.verify_stability(array([1., 1.]))
        self.assertIsNone(self.controller.last_error_signal)


class TestConfiguration(unittest.TestCase):

    """
    Test controller configuration.
    """

    def test_defaults(self):
        controller = KinematicController(LinearKinematics(eye(2)))
        self.assertEqual(controller.gain, 1.)
        self.assertEqual(controller.stability_threshold, 1e-3)
        self.assertTrue(controller.is_set())

    def test_setters(self):
        controller = KinematicController(LinearKinematics(eye(2)))
        controller.set_gain(0.2)
        controller.set_stability_threshold(1e-5)
        self.assertEqual(controller.gain, 0.2)
        self.assertEqual(controller.stability_threshold, 1e-5)

    def test_invalid_gain(self):
        controller = KinematicController(LinearKinematics(eye(2)))
        with self.assertRaises(AssertionError):
            controller.set_gain(-1.)

    def test_no_kinematics(self):
        self.assertFalse(KinematicController(None).is_set())


if __name__ == "__main__":
    unittest.main()
