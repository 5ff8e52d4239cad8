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

"""Core module.

This module provides the fundamental pieces shared by every conversion:

- **Constants**: numerical tolerances (``EPSILON``, ``GIMBAL_LOCK_THRESHOLD``),
  angle conversion factors and the default Euler order
- **Data Structures**: value types for each rotation representation and the
  aggregate ``ConversionResult`` with its JSON-ready ``to_dict()`` form

Example Usage:
    >>> from pyattitude.core import *
    >>>
    >>> mrp = MrpData(0.0, 0.0, 0.5)
    >>> mrp.norm_sq()
    0.25
"""

from .constants import *
from .data_structures import *
