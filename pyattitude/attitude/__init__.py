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
Attitude module for rotation representations.

This module provides functions for converting between different attitude representations:
- Quaternions (scalar first, unit norm, w >= 0)
- Euler angles in 12 orders (6 Tait-Bryan, 6 Proper Euler)
- Modified Rodrigues Parameters with shadow set
- Axis-angle
- Rotation matrices

The quaternion is the hub: every conversion goes to or from a Quaternion.
All rotations assume right-hand coordinate frames.
"""

from .dcm import dcm2quat
from .euler import (
    EulerOrder,
    dcm2euler,
    euler2dcm,
    euler2quat,
    euler_orders,
    parse_euler_order,
    quat2euler,
)
from .mrp import mrp2quat, quat2mrp
from .quaternion import Quaternion, axis_angle2quat, quat2axis_angle, quat2dcm, quat_normalize

__all__ = [
    'Quaternion', 'quat_normalize', 'quat2dcm', 'quat2axis_angle', 'axis_angle2quat',
    'EulerOrder', 'parse_euler_order', 'euler_orders',
    'euler2quat', 'euler2dcm', 'dcm2euler', 'quat2euler',
    'quat2mrp', 'mrp2quat',
    'dcm2quat',
]
