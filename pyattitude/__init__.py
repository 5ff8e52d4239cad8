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
pyattitude - 3-D Rotation Representation Conversions

Converts between unit quaternions, Euler angles (12 orders), Modified
Rodrigues Parameters with shadow set, axis-angle and rotation matrices,
returning all representations at once from any one of them.
"""

__version__ = "0.1.0"
__author__ = "PyINS Development Team"
__title__ = "pyattitude"
__description__ = "3-D rotation representation conversions"

from .core import *
from .attitude import *
from .convert import (
    convert_from_axis_angle,
    convert_from_euler,
    convert_from_mrp,
    convert_from_quaternion,
    convert_from_rotation_matrix,
    create_result,
    degrees_to_radians,
    from_axis_angle,
    from_euler,
    from_mrp,
    from_quaternion,
    from_rotation_matrix,
    get_euler_orders,
    radians_to_degrees,
    version,
)
