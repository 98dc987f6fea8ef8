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
Planar serial arm with revolute joints, used by the examples in this folder.
"""

from numpy import array, cos, cumsum, sin, zeros

from pytaskcontrol import Kinematics


class PlanarArm(Kinematics):

    """
    Position of the end of a planar serial arm.

    Parameters
    ----------
    lengths : list of scalars
        Link lengths in [m].
    """

    def __init__(self, lengths):
        self.lengths = array(lengths, dtype=float)

    @property
    def nb_dofs(self):
        return len(self.lengths)

    def _task_variable(self, q, primitive=None):
        angles = cumsum(q)
        return array([
            self.lengths.dot(cos(angles)),
            self.lengths.dot(sin(angles))])

    def _jacobian(self, q, primitive=None):
        angles = cumsum(q)
        xs = self.lengths * cos(angles)
        ys = self.lengths * sin(angles)
        J = zeros((2, self.nb_dofs))
        for i in range(self.nb_dofs):
            # joint i moves all links from i onward
            J[0, i] = -ys[i:].sum()
            J[1, i] = +xs[i:].sum()
        return J
