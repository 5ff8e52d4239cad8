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
Attitude conversion from rotation matrices.

References:
    Shepperd, S. W., "Quaternion from Rotation Matrix",
    Journal of Guidance and Control, Vol. 1, No. 3, 1978
"""

import numpy as np
from numba import njit

from .quaternion import Quaternion


@njit(cache=True, fastmath=True)
def _shepperd(C):
    """
    Quaternion from rotation matrix by Shepperd's method.

    The component with the largest magnitude is recovered from the diagonal
    first and the remaining ones from the off-diagonal sums and differences.
    """
    tr = C[0, 0] + C[1, 1] + C[2, 2]
    best = max(tr, C[0, 0], C[1, 1], C[2, 2])
    if best == tr:
        a = np.sqrt(1.0 + tr)
        return np.array([0.5*a,
                         0.5*(C[2, 1] - C[1, 2])/a,
                         0.5*(C[0, 2] - C[2, 0])/a,
                         0.5*(C[1, 0] - C[0, 1])/a], dtype=np.double)
    if best == C[0, 0]:
        a = np.sqrt(1.0 + C[0, 0] - C[1, 1] - C[2, 2])
        return np.array([0.5*(C[2, 1] - C[1, 2])/a,
                         0.5*a,
                         0.5*(C[0, 1] + C[1, 0])/a,
                         0.5*(C[2, 0] + C[0, 2])/a], dtype=np.double)
    if best == C[1, 1]:
        a = np.sqrt(1.0 - C[0, 0] + C[1, 1] - C[2, 2])
        return np.array([0.5*(C[0, 2] - C[2, 0])/a,
                         0.5*(C[0, 1] + C[1, 0])/a,
                         0.5*a,
                         0.5*(C[1, 2] + C[2, 1])/a], dtype=np.double)
    a = np.sqrt(1.0 - C[0, 0] - C[1, 1] + C[2, 2])
    return np.array([0.5*(C[1, 0] - C[0, 1])/a,
                     0.5*(C[2, 0] + C[0, 2])/a,
                     0.5*(C[2, 1] + C[1, 2])/a,
                     0.5*a], dtype=np.double)


def dcm2quat(C) -> Quaternion:
    """
    Convert rotation matrix into corresponding quaternion.

    Parameters
    ----------
    C : array_like, shape (3, 3)
        Orthonormal rotation matrix (not validated)

    Returns
    -------
    q : Quaternion
        Normalized quaternion with w >= 0
    """
    return Quaternion.from_array(_shepperd(np.ascontiguousarray(C, dtype=np.double)))
