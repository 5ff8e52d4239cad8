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

"""Numerical Constants and Conversion Parameters"""

import numpy as np

# Numerical tolerances
EPSILON = 1e-10                # norm below which a vector/quaternion is degenerate
GIMBAL_LOCK_THRESHOLD = 1e-6   # distance from +/-1 that triggers gimbal lock

# Angle conversion
PI = np.pi
HALF_PI = 0.5 * np.pi

# Euler order defaults
DEFAULT_EULER_ORDER = "ZYX"    # fallback for unrecognized order strings

# Gimbal lock polarity labels
LOCK_POSITIVE = "positive"
LOCK_NEGATIVE = "negative"

# Euler order families
FAMILY_TAIT_BRYAN = "Tait-Bryan"
FAMILY_PROPER_EULER = "Proper Euler"
