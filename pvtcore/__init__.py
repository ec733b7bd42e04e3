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
pvtcore - GNSS PVT candidate corrections

Resolves, for every satellite fed to a PVT solver, the corrected signal
transmission time and the tropospheric delay affecting its pseudo range.
"""

__version__ = "1.0.0"
__author__ = "PyINS Development Team"
__title__ = "pvtcore"
__description__ = "Transmission time and tropospheric delay corrections for GNSS PVT solvers"

# registers the TRACE level used by the modules below
from . import logger
from .core import *
from .config import Mode, Modeling
from .observation import Candidate, PseudoRange
from .gnss import Models, TropoComponents
