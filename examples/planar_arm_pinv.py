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

"""
Drive a redundant planar arm to a target with the pseudo-inverse controller.
"""

import os
import sys

from numpy import array

try:
    import pytaskcontrol
except ImportError:
    script_path = os.path.realpath(__file__)
    sys.path.append(os.path.dirname(script_path) + '/../')
    import pytaskcontrol

from pytaskcontrol import PseudoInverseController, info

from planar_arm import PlanarArm


if __name__ == "__main__":
    arm = PlanarArm([0.4, 0.3, 0.2])
    controller = PseudoInverseController(arm, gain=0.2)
    controller.set_stability_threshold(1e-6)
    controller.verbosity = 2
    q = array([0.3, 0.4, 0.5])
    target = array([0.1, 0.6])
    nb_steps = 0
    while not controller.is_stable and nb_steps < 1000:
        q = q + controller.compute_control_signal(q, target)
        nb_steps += 1
    info("final position: %s after %d steps" % (
        str(arm.task_variable(q)), nb_steps))
