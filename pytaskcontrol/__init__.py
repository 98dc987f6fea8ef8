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

from .constraints import ConstraintSet
from .controller import KinematicController
from .exceptions import DimensionMismatch
from .exceptions import FeedforwardNotImplementedWarning
from .exceptions import InfeasibleQP
from .exceptions import OptimumNotFound
from .exceptions import UnboundedQP
from .kinematics import Kinematics
from .kinematics import LinearKinematics
from .misc import info
from .misc import warn
from .optim import solve_qp
from .pinv_controller import PseudoInverseController
from .qp_controller import ClassicQPController
from .qp_controller import TaskspaceQPController

__all__ = [
    'ClassicQPController',
    'ConstraintSet',
    'DimensionMismatch',
    'FeedforwardNotImplementedWarning',
    'InfeasibleQP',
    'KinematicController',
    'Kinematics',
    'LinearKinematics',
    'OptimumNotFound',
    'PseudoInverseController',
    'TaskspaceQPController',
    'UnboundedQP',
    'info',
    'solve_qp',
    'warn',
]

__version__ = '0.1.0'
