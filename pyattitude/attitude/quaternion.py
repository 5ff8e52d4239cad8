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
Quaternion value type and conversions from quaternions.

The quaternion is the hub representation: every other representation is
converted to and from it. Quaternions are stored scalar first [w, x, y, z],
kept at unit norm and sign-canonicalized so that w >= 0.

References:
    Principles of GNSS, Inertial, and Multisensor Integrated Navigation Systems
    - (2013) Paul D. Groves
"""

import logging
from dataclasses import dataclass

import numpy as np
from numba import njit

from ..core.constants import EPSILON
from ..core.data_structures import QuaternionData

logger = logging.getLogger(__name__)


@njit(cache=True, fastmath=True)
def quat_normalize(q):
    """
    Normalize a quaternion and canonicalize its sign.

    The quaternion is divided by its norm only when the norm exceeds
    EPSILON; a (near) zero quaternion is returned unscaled. All four
    components are then negated if w < 0.

    Parameters
    ----------
    q : array_like, shape (4,)
        Quaternion [w, x, y, z]

    Returns
    -------
    q_n : ndarray, shape (4,)
        Normalized quaternion with w >= 0
    """
    w, x, y, z = q
    n = np.sqrt(w*w + x*x + y*y + z*z)
    if n > EPSILON:
        w /= n
        x /= n
        y /= n
        z /= n
    if w < 0.0:
        w, x, y, z = -w, -x, -y, -z
    return np.array([w, x, y, z], dtype=np.double)


@njit(cache=True, fastmath=True)
def quat2dcm(q):
    """
    Convert quaternion to corresponding rotation matrix.

    Parameters
    ----------
    q : array_like, shape (4,)
        Unit quaternion [w, x, y, z]

    Returns
    -------
    C : ndarray, shape (3, 3)
        Rotation matrix (row-major)
    """
    w, x, y, z = q
    C = np.array([[1.0 - 2.0*(y*y + z*z),       2.0*(x*y - z*w),       2.0*(x*z + y*w)],
                  [      2.0*(x*y + z*w), 1.0 - 2.0*(x*x + z*z),       2.0*(y*z - x*w)],
                  [      2.0*(x*z - y*w),       2.0*(y*z + x*w), 1.0 - 2.0*(x*x + y*y)]],
                 dtype=np.double)
    return C


@njit(cache=True, fastmath=True)
def quat2axis_angle(q):
    """
    Convert quaternion to rotation axis and angle.

    Parameters
    ----------
    q : array_like, shape (4,)
        Unit quaternion [w, x, y, z] with w >= 0

    Returns
    -------
    axis : ndarray, shape (3,)
        Unit rotation axis, [1, 0, 0] for a near-identity rotation
    angle : float
        Rotation angle in radians [0, pi]
    """
    w, x, y, z = q
    angle = 2.0 * np.arccos(min(max(w, -1.0), 1.0))
    s = np.sqrt(max(1.0 - w*w, 0.0))
    if s < EPSILON:
        return np.array([1.0, 0.0, 0.0], dtype=np.double), 0.0
    return np.array([x/s, y/s, z/s], dtype=np.double), angle


@njit(cache=True, fastmath=True)
def axis_angle2quat(axis, angle):
    """
    Convert rotation axis and angle to corresponding quaternion.

    Parameters
    ----------
    axis : array_like, shape (3,)
        Rotation axis, need not be unit length
    angle : float
        Rotation angle in radians

    Returns
    -------
    q : ndarray, shape (4,)
        Quaternion [w, x, y, z] with w >= 0, identity when the axis is degenerate
    """
    n = np.sqrt(axis[0]*axis[0] + axis[1]*axis[1] + axis[2]*axis[2])
    if n < EPSILON:
        return np.array([1.0, 0.0, 0.0, 0.0], dtype=np.double)
    s = np.sin(0.5 * angle)
    q = np.array([np.cos(0.5 * angle), axis[0]/n*s, axis[1]/n*s, axis[2]/n*s],
                 dtype=np.double)
    return quat_normalize(q)


@dataclass(frozen=True)
class Quaternion:
    """Rotation quaternion [w, x, y, z].

    Construction always normalizes and canonicalizes the sign (w >= 0).
    The all-zero quaternion is kept as given (degenerate, not unit) rather than rejected.

    Examples
    --------
    >>> q = Quaternion(-2.0, 0.0, 0.0, 0.0)
    >>> q.w
    1.0
    """
    w: float = 1.0
    x: float = 0.0
    y: float = 0.0
    z: float = 0.0

    def __post_init__(self):
        raw = np.array([self.w, self.x, self.y, self.z], dtype=np.double)
        if np.sqrt(np.dot(raw, raw)) <= EPSILON:
            logger.debug("Degenerate quaternion %s left un-normalized", raw)
        q = quat_normalize(raw)
        object.__setattr__(self, 'w', float(q[0]))
        object.__setattr__(self, 'x', float(q[1]))
        object.__setattr__(self, 'y', float(q[2]))
        object.__setattr__(self, 'z', float(q[3]))

    @classmethod
    def identity(cls) -> 'Quaternion':
        return cls(1.0, 0.0, 0.0, 0.0)

    @classmethod
    def from_array(cls, q) -> 'Quaternion':
        """Build from any length-4 sequence [w, x, y, z]"""
        w, x, y, z = (float(v) for v in q)
        return cls(w, x, y, z)

    @classmethod
    def from_axis_angle(cls, axis, angle: float) -> 'Quaternion':
        """
        Build from a rotation axis and angle.

        A rotation axis whose norm is below EPSILON yields the identity
        quaternion and the angle is discarded.

        Parameters
        ----------
        axis : array_like, shape (3,)
            Rotation axis, need not be unit length
        angle : float
            Rotation angle in radians
        """
        axis = np.asarray(axis, dtype=np.double)
        if np.linalg.norm(axis) < EPSILON:
            logger.debug("Degenerate rotation axis %s, using identity", axis)
        return cls.from_array(axis_angle2quat(axis, float(angle)))

    def as_array(self) -> np.ndarray:
        return np.array([self.w, self.x, self.y, self.z], dtype=np.double)

    def norm(self) -> float:
        return float(np.sqrt(self.w**2 + self.x**2 + self.y**2 + self.z**2))

    def to_rotation_matrix(self) -> np.ndarray:
        return quat2dcm(self.as_array())

    def to_axis_angle(self):
        """Return (axis, angle); axis is [1, 0, 0] and angle 0 near identity"""
        axis, angle = quat2axis_angle(self.as_array())
        return axis, float(angle)

    def to_data(self) -> QuaternionData:
        return QuaternionData(self.w, self.x, self.y, self.z)
