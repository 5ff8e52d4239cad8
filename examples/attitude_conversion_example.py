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

"""Example usage of the attitude conversion entry points"""

import json

import numpy as np

from pyattitude import (
    convert_from_euler,
    degrees_to_radians,
    from_axis_angle,
    from_mrp,
    get_euler_orders,
    radians_to_degrees,
)
from pyattitude.logger import setup_logger


def example_yaw_pitch_roll():
    """Aerospace yaw-pitch-roll to every other representation"""
    print("=== Example 1: Yaw-Pitch-Roll ===\n")

    yaw, pitch, roll = (degrees_to_radians(d) for d in (30.0, 10.0, -5.0))
    result = json.loads(convert_from_euler(yaw, pitch, roll, "ZYX", True))

    print(f"Quaternion: {result['quaternion']}")
    print(f"MRP: {result['mrp']}")
    aa = result['axis_angle']
    print(f"Axis: {np.round(aa['axis'], 4)}, angle: {radians_to_degrees(aa['angle']):.3f} deg")
    print(f"Rotation matrix:\n{np.array(result['rotation_matrix']['matrix'])}\n")


def example_gimbal_lock():
    """Pitch of exactly 90 deg collapses yaw and roll into one angle"""
    print("=== Example 2: Gimbal Lock ===\n")

    result = json.loads(convert_from_euler(0.3, np.pi / 2, 0.2, "XYZ", True))
    euler = result['euler']
    print(f"Angles: {euler['angle1']:.4f}, {euler['angle2']:.4f}, {euler['angle3']:.4f}")
    print(f"Gimbal lock: {euler['gimbal_lock']}\n")


def example_large_mrp():
    """A 270 deg rotation comes back as the equivalent -90 deg parameter set"""
    print("=== Example 3: MRP Beyond 180 deg ===\n")

    # |sigma| = tan(270 / 4 deg) > 1
    sigma = np.tan(degrees_to_radians(270.0) / 4)
    result = from_mrp(0.0, 0.0, sigma, False, "ZYX", True)
    print(f"Input sigma3: {sigma:.4f}")
    print(f"Reported MRP: {result.mrp}")
    print(f"Axis-angle: {result.axis_angle.axis}, "
          f"{radians_to_degrees(result.axis_angle.angle):.1f} deg\n")


def example_orders():
    """Same rotation in every supported order"""
    print("=== Example 4: Euler Orders ===\n")

    for code, family, name in json.loads(get_euler_orders()):
        result = from_axis_angle(1.0, 2.0, 3.0, np.pi / 5, code)
        e = result.euler
        label = f" ({name})" if name else ""
        print(f"{code} [{family}]{label}: "
              f"{e.angle1:+.4f} {e.angle2:+.4f} {e.angle3:+.4f}")


if __name__ == "__main__":
    setup_logger(level="DEBUG")
    example_yaw_pitch_roll()
    example_gimbal_lock()
    example_large_mrp()
    example_orders()
