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

from numpy import dot, sqrt


def info(msg):
    """
    Print an information message.

    Parameters
    ----------
    msg : string
        Message to print.
    """
    print("\033[0;32m[pytaskcontrol] Info:\033[0;0m", msg)


def warn(msg):
    print("\033[1;33m[pytaskcontrol] Warning:\033[0;0m", msg)


def norm(v):
    """
    Euclidean norm.

    Parameters
    ----------
    v : array
        Any vector.

    Returns
    -------
    n : scalar
        Euclidean norm of `v`.

    Note
    ----
    This straightforward function is faster than :func:`numpy.linalg.norm` on
    the small vectors found in task-space control.
    """
    return sqrt(dot(v, v))
