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

"""Core data structures for rotation conversion results"""

from dataclasses import dataclass, field
from typing import Optional

import numpy as np


@dataclass
class QuaternionData:
    """Quaternion components [w, x, y, z] (scalar first)"""
    w: float
    x: float
    y: float
    z: float

    def to_dict(self) -> dict:
        return {'w': float(self.w), 'x': float(self.x),
                'y': float(self.y), 'z': float(self.z)}


@dataclass
class GimbalLockInfo:
    """Gimbal lock annotation attached to a singular Euler decomposition.

    Attributes
    ----------
    lock_type : str
        'positive' or 'negative'. For Tait-Bryan orders this is the sign of
        the middle angle (+/-90 deg); for Proper Euler orders 'positive'
        means the middle angle collapsed to 0 and 'negative' to 180 deg.
    combined_angle : float
        Angle (rad) absorbed into the first Euler angle
    """
    lock_type: str
    combined_angle: float

    def to_dict(self) -> dict:
        return {'lock_type': self.lock_type,
                'combined_angle': float(self.combined_angle)}


@dataclass
class EulerData:
    """Euler angle triple tagged with its rotation order.

    Attributes
    ----------
    angle1, angle2, angle3 : float
        Rotation angles in radians, applied in the order given by `order`
    order : str
        Three letter order code, e.g. 'ZYX' or 'ZXZ'
    gimbal_lock : GimbalLockInfo or None
        Present only when the decomposition was singular
    """
    angle1: float
    angle2: float
    angle3: float
    order: str
    gimbal_lock: Optional[GimbalLockInfo] = None

    @property
    def angles(self) -> np.ndarray:
        """Angles as an array [angle1, angle2, angle3]"""
        return np.array([self.angle1, self.angle2, self.angle3])

    def to_dict(self) -> dict:
        return {
            'angle1': float(self.angle1),
            'angle2': float(self.angle2),
            'angle3': float(self.angle3),
            'order': self.order,
            'gimbal_lock': self.gimbal_lock.to_dict() if self.gimbal_lock else None,
        }


@dataclass
class MrpData:
    """Modified Rodrigues Parameters with shadow-set flag"""
    sigma1: float
    sigma2: float
    sigma3: float
    is_shadow: bool = False

    @property
    def sigma(self) -> np.ndarray:
        return np.array([self.sigma1, self.sigma2, self.sigma3])

    def norm_sq(self) -> float:
        """Squared magnitude of the parameter vector"""
        return float(self.sigma1**2 + self.sigma2**2 + self.sigma3**2)

    def to_dict(self) -> dict:
        return {'sigma1': float(self.sigma1), 'sigma2': float(self.sigma2),
                'sigma3': float(self.sigma3), 'is_shadow': bool(self.is_shadow)}


@dataclass
class AxisAngleData:
    """Rotation axis and angle.

    The axis is (1, 0, 0) whenever the rotation is close to identity and
    the angle lies in [0, pi] because the source quaternion has w >= 0.
    """
    axis: np.ndarray = field(default_factory=lambda: np.array([1.0, 0.0, 0.0]))
    angle: float = 0.0

    def to_dict(self) -> dict:
        return {'axis': [float(a) for a in self.axis], 'angle': float(self.angle)}


@dataclass
class RotationMatrixData:
    """3x3 rotation matrix (row-major)"""
    matrix: np.ndarray = field(default_factory=lambda: np.eye(3))

    def to_dict(self) -> dict:
        return {'matrix': [[float(v) for v in row] for row in self.matrix]}


@dataclass
class ConversionResult:
    """All five views of one rotation.

    Every field is derived from the same canonical quaternion, so the
    representations are always mutually consistent.
    """
    quaternion: QuaternionData
    euler: EulerData
    mrp: MrpData
    axis_angle: AxisAngleData
    rotation_matrix: RotationMatrixData

    def to_dict(self) -> dict:
        """Serialize to the plain-Python form used for JSON output"""
        return {
            'quaternion': self.quaternion.to_dict(),
            'euler': self.euler.to_dict(),
            'mrp': self.mrp.to_dict(),
            'axis_angle': self.axis_angle.to_dict(),
            'rotation_matrix': self.rotation_matrix.to_dict(),
        }
