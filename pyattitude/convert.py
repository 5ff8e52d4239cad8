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

"""Conversion entry points returning every representation at once.

Each ``from_*`` function reconstructs a canonical quaternion from its own
input and hands it to :func:`create_result`, the single place where the
Euler, MRP, axis-angle and matrix views are derived. The ``convert_from_*``
functions wrap these and return the result serialized as JSON.

None of the entry points raise on numeric input: a zero axis gives the
identity, a zero quaternion stays un-normalized, an unknown order falls back
to ZYX and singular Euler decompositions carry a gimbal lock annotation.
"""

import json

from . import __version__
from .attitude.dcm import dcm2quat
from .attitude.euler import EulerOrder, euler2quat, euler_orders, parse_euler_order, quat2euler
from .attitude.mrp import mrp2quat, quat2mrp
from .attitude.quaternion import Quaternion
from .core.constants import DEFAULT_EULER_ORDER, PI
from .core.data_structures import (
    AxisAngleData,
    ConversionResult,
    MrpData,
    RotationMatrixData,
)


def create_result(q: Quaternion, order: EulerOrder, auto_shadow: bool) -> ConversionResult:
    """
    Derive all representations of a quaternion.

    Parameters
    ----------
    q : Quaternion
        Canonical quaternion
    order : EulerOrder
        Order used for the Euler view
    auto_shadow : bool
        Allow the MRP view to switch to the shadow set

    Returns
    -------
    ConversionResult
        Quaternion, Euler, MRP, axis-angle and rotation matrix views
    """
    axis, angle = q.to_axis_angle()
    return ConversionResult(
        quaternion=q.to_data(),
        euler=quat2euler(q, order),
        mrp=quat2mrp(q, auto_shadow),
        axis_angle=AxisAngleData(axis=axis, angle=angle),
        rotation_matrix=RotationMatrixData(matrix=q.to_rotation_matrix()),
    )


def from_quaternion(w, x, y, z, euler_order=DEFAULT_EULER_ORDER,
                    auto_shadow_mrp=True) -> ConversionResult:
    q = Quaternion(float(w), float(x), float(y), float(z))
    return create_result(q, parse_euler_order(euler_order), auto_shadow_mrp)


def from_euler(angle1, angle2, angle3, euler_order=DEFAULT_EULER_ORDER,
               auto_shadow_mrp=True) -> ConversionResult:
    order = parse_euler_order(euler_order)
    q = euler2quat(angle1, angle2, angle3, order)
    return create_result(q, order, auto_shadow_mrp)


def from_mrp(sigma1, sigma2, sigma3, is_shadow=False, euler_order=DEFAULT_EULER_ORDER,
             auto_shadow_mrp=True) -> ConversionResult:
    mrp = MrpData(float(sigma1), float(sigma2), float(sigma3), bool(is_shadow))
    return create_result(mrp2quat(mrp), parse_euler_order(euler_order), auto_shadow_mrp)


def from_axis_angle(axis_x, axis_y, axis_z, angle, euler_order=DEFAULT_EULER_ORDER,
                    auto_shadow_mrp=True) -> ConversionResult:
    q = Quaternion.from_axis_angle([axis_x, axis_y, axis_z], angle)
    return create_result(q, parse_euler_order(euler_order), auto_shadow_mrp)


def from_rotation_matrix(matrix, euler_order=DEFAULT_EULER_ORDER,
                         auto_shadow_mrp=True) -> ConversionResult:
    """Convert from a 3x3 orthonormal rotation matrix (row-major)"""
    return create_result(dcm2quat(matrix), parse_euler_order(euler_order), auto_shadow_mrp)


def _to_json(result: ConversionResult) -> str:
    return json.dumps(result.to_dict())


def convert_from_quaternion(w: float, x: float, y: float, z: float,
                            euler_order: str = DEFAULT_EULER_ORDER,
                            auto_shadow_mrp: bool = True) -> str:
    """Quaternion [w, x, y, z] (normalized on input) to JSON result"""
    return _to_json(from_quaternion(w, x, y, z, euler_order, auto_shadow_mrp))


def convert_from_euler(angle1: float, angle2: float, angle3: float,
                       euler_order: str = DEFAULT_EULER_ORDER,
                       auto_shadow_mrp: bool = True) -> str:
    """Euler angles (rad) in the given order to JSON result"""
    return _to_json(from_euler(angle1, angle2, angle3, euler_order, auto_shadow_mrp))


def convert_from_mrp(sigma1: float, sigma2: float, sigma3: float, is_shadow: bool = False,
                     euler_order: str = DEFAULT_EULER_ORDER,
                     auto_shadow_mrp: bool = True) -> str:
    """MRP vector to JSON result; `is_shadow` does not change the rotation"""
    return _to_json(from_mrp(sigma1, sigma2, sigma3, is_shadow, euler_order, auto_shadow_mrp))


def convert_from_axis_angle(axis_x: float, axis_y: float, axis_z: float, angle: float,
                            euler_order: str = DEFAULT_EULER_ORDER,
                            auto_shadow_mrp: bool = True) -> str:
    """Axis (any length) and angle (rad) to JSON result"""
    return _to_json(from_axis_angle(axis_x, axis_y, axis_z, angle, euler_order, auto_shadow_mrp))


def convert_from_rotation_matrix(matrix, euler_order: str = DEFAULT_EULER_ORDER,
                                 auto_shadow_mrp: bool = True) -> str:
    return _to_json(from_rotation_matrix(matrix, euler_order, auto_shadow_mrp))


def degrees_to_radians(degrees: float) -> float:
    return degrees * PI / 180.0


def radians_to_degrees(radians: float) -> float:
    return radians * 180.0 / PI


def get_euler_orders() -> str:
    """JSON list of [code, family, common name] for the 12 supported orders"""
    return json.dumps(euler_orders())


def version() -> str:
    return __version__
