# Copyright 2024 inuex35
#
# Licensed under the Apache License, Version 2.0 (the "License");
# you may not use this file except in compliance with the License.
# You may obtain a copy of the License at
#
#     http://www.apache.org/licenses/LICENSE-2.0
#
# Unless required by applicable law or agreed to in writing, software
# distributed under the License is distributed on an "AS IS" BASIS,
# WITHOUT WARRANTIES OR CONDITIONS OF ANY KIND, either express or implied.
# See the License for the specific language governing permissions and
# limitations under the License.

"""
Modified Rodrigues Parameters (MRP) conversions.

The primary set sigma = v / (1 + w) is singular at a 360 deg rotation. The
shadow set sigma' = -sigma / |sigma|^2 describes the same rotation with the
singularity moved to the opposite pole, so switching to it whenever
|sigma|^2 > 1 keeps the parameter magnitude bounded by one.

References:
    Schaub, H. and Junkins, J. L., Analytical Mechanics of Space Systems
"""

import logging

import numpy as np
from numba import njit

from ..core.constants import EPSILON
from ..core.data_structures import MrpData
from .quaternion import Quaternion

logger = logging.getLogger(__name__)


@njit(cache=True, fastmath=True)
def _quat2mrp(q, auto_shadow):
    w, x, y, z = q
    denom = 1.0 + w
    if denom < EPSILON:
        d = 1.0 - w
        return np.array([-x/d, -y/d, -z/d], dtype=np.double), True
    s1, s2, s3 = x/denom, y/denom, z/denom
    norm_sq = s1*s1 + s2*s2 + s3*s3
    if auto_shadow and norm_sq > 1.0:
        return np.array([-s1/norm_sq, -s2/norm_sq, -s3/norm_sq], dtype=np.double), True
    return np.array([s1, s2, s3], dtype=np.double), False


@njit(cache=True, fastmath=True)
def _mrp2quat(sigma):
    s1, s2, s3 = sigma
    sq = s1*s1 + s2*s2 + s3*s3
    d = 1.0 + sq
    return np.array([(1.0 - sq)/d, 2.0*s1/d, 2.0*s2/d, 2.0*s3/d], dtype=np.double)


def quat2mrp(q: Quaternion, auto_shadow: bool = True) -> MrpData:
    """
    Convert quaternion to Modified Rodrigues Parameters.

    Parameters
    ----------
    q : Quaternion
        Unit quaternion
    auto_shadow : bool, optional
        Switch to the shadow set when the primary set has |sigma|^2 > 1

    Returns
    -------
    mrp : MrpData
        MRP vector and whether it is the shadow set

    Notes
    -----
    When 1 + w < EPSILON the primary set is undefined and the shadow set
    -v / (1 - w) is returned regardless of `auto_shadow`.
    """
    sigma, is_shadow = _quat2mrp(q.as_array(), bool(auto_shadow))
    return MrpData(float(sigma[0]), float(sigma[1]), float(sigma[2]), bool(is_shadow))


def mrp2quat(mrp: MrpData) -> Quaternion:
    """
    Convert Modified Rodrigues Parameters to quaternion.

    The `is_shadow` flag is not consulted: a shadow set yields the antipodal
    quaternion of its primary set, and both normalize to the same rotation.
    """
    return Quaternion.from_array(_mrp2quat(mrp.sigma))
