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


class OptimumNotFound(Exception):

    """The QP solver did not return an optimal solution."""

    def __init__(self, status):
        super(OptimumNotFound, self).__init__(
            "QP optimum not found: %s" % status)
        self.status = status


class InfeasibleQP(OptimumNotFound):

    """Constraints of the QP admit no feasible point."""

    pass


class UnboundedQP(OptimumNotFound):

    """QP objective is unbounded below, or its matrix is not definite."""

    pass


class DimensionMismatch(ValueError):

    """
    Matrix or vector inconsistent with the control-input dimension.

    Parameters
    ----------
    name : string
        Name of the offending matrix or vector.
    msg : string
        Description of the mismatch.
    """

    def __init__(self, name, msg):
        super(DimensionMismatch, self).__init__("%s: %s" % (name, msg))
        self.name = name


class FeedforwardNotImplementedWarning(UserWarning):

    """Tracking control was asked for but the feedforward term is ignored."""

    pass


__all__ = [
    'DimensionMismatch',
    'FeedforwardNotImplementedWarning',
    'InfeasibleQP',
    'OptimumNotFound',
    'UnboundedQP',
]
