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
Euler angle conversions for all 12 rotation orders.

An order 'ABC' denotes the intrinsic sequence R = R_A(angle1) R_B(angle2) R_C(angle3),
equivalently q = q_A(angle1) q_B(angle2) q_C(angle3). Six orders use three distinct
axes (Tait-Bryan) and six repeat the first axis last (Proper Euler).

Every order has its own composition kernel (half-angle quaternion product) and
decomposition kernel (reads rotation matrix entries). Decomposition always goes
through the rotation matrix, and a singular decomposition is reported as a
gimbal lock instead of propagating NaNs.

References:
    Principles of GNSS, Inertial, and Multisensor Integrated Navigation Systems
    - (2013) Paul D. Groves
"""

import logging
from enum import Enum

import numpy as np
from numba import njit

from ..core.constants import (
    DEFAULT_EULER_ORDER,
    FAMILY_PROPER_EULER,
    FAMILY_TAIT_BRYAN,
    GIMBAL_LOCK_THRESHOLD,
    HALF_PI,
    LOCK_NEGATIVE,
    LOCK_POSITIVE,
    PI,
)
from ..core.data_structures import EulerData, GimbalLockInfo
from .quaternion import Quaternion

logger = logging.getLogger(__name__)


class EulerOrder(Enum):
    """Supported Euler rotation orders.

    Each member value is (code, family, common name).
    """
    XYZ = ("XYZ", FAMILY_TAIT_BRYAN, "Roll-Pitch-Yaw")
    XZY = ("XZY", FAMILY_TAIT_BRYAN, "")
    YXZ = ("YXZ", FAMILY_TAIT_BRYAN, "")
    YZX = ("YZX", FAMILY_TAIT_BRYAN, "")
    ZXY = ("ZXY", FAMILY_TAIT_BRYAN, "")
    ZYX = ("ZYX", FAMILY_TAIT_BRYAN, "Yaw-Pitch-Roll (Aerospace)")
    XYX = ("XYX", FAMILY_PROPER_EULER, "")
    XZX = ("XZX", FAMILY_PROPER_EULER, "")
    YXY = ("YXY", FAMILY_PROPER_EULER, "")
    YZY = ("YZY", FAMILY_PROPER_EULER, "")
    ZXZ = ("ZXZ", FAMILY_PROPER_EULER, "Classical Euler (Precession)")
    ZYZ = ("ZYZ", FAMILY_PROPER_EULER, "")

    @property
    def code(self) -> str:
        return self.value[0]

    @property
    def family(self) -> str:
        return self.value[1]

    @property
    def common_name(self) -> str:
        return self.value[2]

    @property
    def is_proper(self) -> bool:
        """True for orders whose first and last axes coincide"""
        return self.family == FAMILY_PROPER_EULER

    @classmethod
    def from_string(cls, s):
        """Match an order code case-insensitively, None if unrecognized"""
        if not isinstance(s, str):
            return None
        return cls.__members__.get(s.upper())


def parse_euler_order(value) -> EulerOrder:
    """
    Resolve an order name, silently falling back to ZYX.

    Parameters
    ----------
    value : str or EulerOrder
        Order code such as 'zyx' or 'ZXZ'

    Returns
    -------
    order : EulerOrder
        Matching order, EulerOrder.ZYX when unrecognized
    """
    if isinstance(value, EulerOrder):
        return value
    order = EulerOrder.from_string(value)
    if order is None:
        logger.debug("Unrecognized Euler order %r, using %s", value, DEFAULT_EULER_ORDER)
        return EulerOrder[DEFAULT_EULER_ORDER]
    return order


def euler_orders():
    """List (code, family, common name) for every supported order"""
    return [order.value for order in EulerOrder]


# ---------------------------------------------------------------------------
# Composition: Euler angles -> quaternion
# ---------------------------------------------------------------------------

@njit(cache=True, fastmath=True)
def _half_angles(a1, a2, a3):
    return (np.cos(0.5*a1), np.sin(0.5*a1),
            np.cos(0.5*a2), np.sin(0.5*a2),
            np.cos(0.5*a3), np.sin(0.5*a3))


@njit(cache=True, fastmath=True)
def _xyz2quat(a1, a2, a3):
    c1, s1, c2, s2, c3, s3 = _half_angles(a1, a2, a3)
    return np.array([c1*c2*c3 - s1*s2*s3,
                     s1*c2*c3 + c1*s2*s3,
                     c1*s2*c3 - s1*c2*s3,
                     c1*c2*s3 + s1*s2*c3], dtype=np.double)


@njit(cache=True, fastmath=True)
def _xzy2quat(a1, a2, a3):
    c1, s1, c2, s2, c3, s3 = _half_angles(a1, a2, a3)
    return np.array([c1*c2*c3 + s1*s2*s3,
                     s1*c2*c3 - c1*s2*s3,
                     c1*c2*s3 - s1*s2*c3,
                     c1*s2*c3 + s1*c2*s3], dtype=np.double)


@njit(cache=True, fastmath=True)
def _yxz2quat(a1, a2, a3):
    c1, s1, c2, s2, c3, s3 = _half_angles(a1, a2, a3)
    return np.array([c1*c2*c3 + s1*s2*s3,
                     c1*s2*c3 + s1*c2*s3,
                     s1*c2*c3 - c1*s2*s3,
                     c1*c2*s3 - s1*s2*c3], dtype=np.double)


@njit(cache=True, fastmath=True)
def _yzx2quat(a1, a2, a3):
    c1, s1, c2, s2, c3, s3 = _half_angles(a1, a2, a3)
    return np.array([c1*c2*c3 - s1*s2*s3,
                     c1*c2*s3 + s1*s2*c3,
                     s1*c2*c3 + c1*s2*s3,
                     c1*s2*c3 - s1*c2*s3], dtype=np.double)


@njit(cache=True, fastmath=True)
def _zxy2quat(a1, a2, a3):
    c1, s1, c2, s2, c3, s3 = _half_angles(a1, a2, a3)
    return np.array([c1*c2*c3 - s1*s2*s3,
                     c1*s2*c3 - s1*c2*s3,
                     c1*c2*s3 + s1*s2*c3,
                     s1*c2*c3 + c1*s2*s3], dtype=np.double)


@njit(cache=True, fastmath=True)
def _zyx2quat(a1, a2, a3):
    c1, s1, c2, s2, c3, s3 = _half_angles(a1, a2, a3)
    return np.array([c1*c2*c3 + s1*s2*s3,
                     c1*c2*s3 - s1*s2*c3,
                     c1*s2*c3 + s1*c2*s3,
                     s1*c2*c3 - c1*s2*s3], dtype=np.double)


@njit(cache=True, fastmath=True)
def _xyx2quat(a1, a2, a3):
    c1, s1, c2, s2, c3, s3 = _half_angles(a1, a2, a3)
    return np.array([c1*c2*c3 - s1*c2*s3,
                     c1*c2*s3 + s1*c2*c3,
                     c1*s2*c3 + s1*s2*s3,
                     s1*s2*c3 - c1*s2*s3], dtype=np.double)


@njit(cache=True, fastmath=True)
def _xzx2quat(a1, a2, a3):
    c1, s1, c2, s2, c3, s3 = _half_angles(a1, a2, a3)
    return np.array([c1*c2*c3 - s1*c2*s3,
                     c1*c2*s3 + s1*c2*c3,
                     c1*s2*s3 - s1*s2*c3,
                     c1*s2*c3 + s1*s2*s3], dtype=np.double)


@njit(cache=True, fastmath=True)
def _yxy2quat(a1, a2, a3):
    c1, s1, c2, s2, c3, s3 = _half_angles(a1, a2, a3)
    return np.array([c1*c2*c3 - s1*c2*s3,
                     c1*s2*c3 + s1*s2*s3,
                     c1*c2*s3 + s1*c2*c3,
                     c1*s2*s3 - s1*s2*c3], dtype=np.double)


@njit(cache=True, fastmath=True)
def _yzy2quat(a1, a2, a3):
    c1, s1, c2, s2, c3, s3 = _half_angles(a1, a2, a3)
    return np.array([c1*c2*c3 - s1*c2*s3,
                     s1*s2*c3 - c1*s2*s3,
                     c1*c2*s3 + s1*c2*c3,
                     c1*s2*c3 + s1*s2*s3], dtype=np.double)


@njit(cache=True, fastmath=True)
def _zxz2quat(a1, a2, a3):
    c1, s1, c2, s2, c3, s3 = _half_angles(a1, a2, a3)
    return np.array([c1*c2*c3 - s1*c2*s3,
                     c1*s2*c3 + s1*s2*s3,
                     s1*s2*c3 - c1*s2*s3,
                     c1*c2*s3 + s1*c2*c3], dtype=np.double)


@njit(cache=True, fastmath=True)
def _zyz2quat(a1, a2, a3):
    c1, s1, c2, s2, c3, s3 = _half_angles(a1, a2, a3)
    return np.array([c1*c2*c3 - s1*c2*s3,
                     c1*s2*s3 - s1*s2*c3,
                     c1*s2*c3 + s1*s2*s3,
                     c1*c2*s3 + s1*c2*c3], dtype=np.double)


# ---------------------------------------------------------------------------
# Decomposition: rotation matrix -> Euler angles
#
# Kernels return (angle1, angle2, angle3, lock) with lock = 0 when regular,
# +1 / -1 for a positive / negative gimbal lock. On lock angle1 is read from
# the middle axis' column, which does not depend on angle2.
# fastmath is off here: atan2 branch cuts depend on signed zeros.
# ---------------------------------------------------------------------------

@njit(cache=True)
def _tait_bryan(s2, y1, x1, y3, x3, y_lock, x_lock):
    if abs(s2) >= 1.0 - GIMBAL_LOCK_THRESHOLD:
        if s2 > 0.0:
            return np.arctan2(y_lock, x_lock), HALF_PI, 0.0, 1
        return np.arctan2(y_lock, x_lock), -HALF_PI, 0.0, -1
    return np.arctan2(y1, x1), np.arcsin(s2), np.arctan2(y3, x3), 0


@njit(cache=True)
def _proper_euler(c2, y1, x1, y3, x3, y_lock, x_lock):
    if 1.0 - abs(c2) < GIMBAL_LOCK_THRESHOLD:
        if c2 > 0.0:
            return np.arctan2(y_lock, x_lock), 0.0, 0.0, 1
        return np.arctan2(y_lock, x_lock), PI, 0.0, -1
    return np.arctan2(y1, x1), np.arccos(c2), np.arctan2(y3, x3), 0


@njit(cache=True)
def _dcm2xyz(C):
    return _tait_bryan(C[0, 2], -C[1, 2], C[2, 2], -C[0, 1], C[0, 0], C[2, 1], C[1, 1])


@njit(cache=True)
def _dcm2xzy(C):
    return _tait_bryan(-C[0, 1], C[2, 1], C[1, 1], C[0, 2], C[0, 0], -C[1, 2], C[2, 2])


@njit(cache=True)
def _dcm2yxz(C):
    return _tait_bryan(-C[1, 2], C[0, 2], C[2, 2], C[1, 0], C[1, 1], -C[2, 0], C[0, 0])


@njit(cache=True)
def _dcm2yzx(C):
    return _tait_bryan(C[1, 0], -C[2, 0], C[0, 0], -C[1, 2], C[1, 1], C[0, 2], C[2, 2])


@njit(cache=True)
def _dcm2zxy(C):
    return _tait_bryan(C[2, 1], -C[0, 1], C[1, 1], -C[2, 0], C[2, 2], C[1, 0], C[0, 0])


@njit(cache=True)
def _dcm2zyx(C):
    return _tait_bryan(-C[2, 0], C[1, 0], C[0, 0], C[2, 1], C[2, 2], -C[0, 1], C[1, 1])


@njit(cache=True)
def _dcm2xyx(C):
    return _proper_euler(C[0, 0], C[1, 0], -C[2, 0], C[0, 1], C[0, 2], C[2, 1], C[1, 1])


@njit(cache=True)
def _dcm2xzx(C):
    return _proper_euler(C[0, 0], C[2, 0], C[1, 0], C[0, 2], -C[0, 1], -C[1, 2], C[2, 2])


@njit(cache=True)
def _dcm2yxy(C):
    return _proper_euler(C[1, 1], C[0, 1], C[2, 1], C[1, 0], -C[1, 2], -C[2, 0], C[0, 0])


@njit(cache=True)
def _dcm2yzy(C):
    return _proper_euler(C[1, 1], C[2, 1], -C[0, 1], C[1, 2], C[1, 0], C[0, 2], C[2, 2])


@njit(cache=True)
def _dcm2zxz(C):
    return _proper_euler(C[2, 2], C[0, 2], -C[1, 2], C[2, 0], C[2, 1], C[1, 0], C[0, 0])


@njit(cache=True)
def _dcm2zyz(C):
    return _proper_euler(C[2, 2], C[1, 2], C[0, 2], C[2, 1], -C[2, 0], -C[0, 1], C[1, 1])


# (composition, decomposition) kernel pair per order
_ORDER_KERNELS = {
    EulerOrder.XYZ: (_xyz2quat, _dcm2xyz),
    EulerOrder.XZY: (_xzy2quat, _dcm2xzy),
    EulerOrder.YXZ: (_yxz2quat, _dcm2yxz),
    EulerOrder.YZX: (_yzx2quat, _dcm2yzx),
    EulerOrder.ZXY: (_zxy2quat, _dcm2zxy),
    EulerOrder.ZYX: (_zyx2quat, _dcm2zyx),
    EulerOrder.XYX: (_xyx2quat, _dcm2xyx),
    EulerOrder.XZX: (_xzx2quat, _dcm2xzx),
    EulerOrder.YXY: (_yxy2quat, _dcm2yxy),
    EulerOrder.YZY: (_yzy2quat, _dcm2yzy),
    EulerOrder.ZXZ: (_zxz2quat, _dcm2zxz),
    EulerOrder.ZYZ: (_zyz2quat, _dcm2zyz),
}


def euler2quat(angle1: float, angle2: float, angle3: float,
               order=EulerOrder.ZYX) -> Quaternion:
    """
    Convert Euler angles to corresponding quaternion.

    Parameters
    ----------
    angle1, angle2, angle3 : float
        Euler angles in radians, applied in the sequence given by `order`
    order : EulerOrder or str, optional
        Rotation order (default ZYX); unrecognized strings fall back to ZYX

    Returns
    -------
    q : Quaternion
        Normalized quaternion with w >= 0
    """
    order = parse_euler_order(order)
    compose, _ = _ORDER_KERNELS[order]
    return Quaternion.from_array(compose(float(angle1), float(angle2), float(angle3)))


def euler2dcm(angle1: float, angle2: float, angle3: float,
              order=EulerOrder.ZYX) -> np.ndarray:
    """Convert Euler angles to rotation matrix via the quaternion"""
    return euler2quat(angle1, angle2, angle3, order).to_rotation_matrix()


def dcm2euler(C, order=EulerOrder.ZYX) -> EulerData:
    """
    Convert rotation matrix into Euler angles of the given order.

    Tait-Bryan orders lock when |sin(angle2)| >= 1 - GIMBAL_LOCK_THRESHOLD:
    angle2 snaps to +/-pi/2. Proper Euler orders lock when the repeated-axis
    diagonal entry is within GIMBAL_LOCK_THRESHOLD of +/-1: angle2 snaps to
    0 or pi. In both cases angle3 is set to 0 and angle1 carries the combined
    rotation, which is also recorded in the gimbal lock annotation.

    Parameters
    ----------
    C : array_like, shape (3, 3)
        Rotation matrix
    order : EulerOrder or str, optional
        Rotation order (default ZYX)

    Returns
    -------
    euler : EulerData
        Euler angles in radians with optional gimbal lock annotation
    """
    order = parse_euler_order(order)
    _, decompose = _ORDER_KERNELS[order]
    a1, a2, a3, lock = decompose(np.ascontiguousarray(C, dtype=np.double))

    gimbal_lock = None
    if lock != 0:
        lock_type = LOCK_POSITIVE if lock > 0 else LOCK_NEGATIVE
        gimbal_lock = GimbalLockInfo(lock_type=lock_type, combined_angle=float(a1))
        logger.debug("Gimbal lock (%s) in %s decomposition", lock_type, order.code)

    return EulerData(angle1=float(a1), angle2=float(a2), angle3=float(a3),
                     order=order.code, gimbal_lock=gimbal_lock)


def quat2euler(q: Quaternion, order=EulerOrder.ZYX) -> EulerData:
    """Convert quaternion to Euler angles, always through the rotation matrix"""
    return dcm2euler(q.to_rotation_matrix(), order)
