# Copyright (C) 2025 Brantleigh Bunting
# SPDX-License-Identifier: BSL-1.1
#
# Use of this software is governed by the Business Source License
# included in the LICENSE file and at <https://mariadb.com/bsl11>

import math


class Radian(float):
    """An angle in radians; 1 radian = 180/π degrees."""

    @classmethod
    def from_degrees(cls, degrees: float) -> "Radian":
        return cls(degrees * (math.pi / 180))

    def degrees(self) -> float:
        return float(self) * (180 / math.pi)

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({float(self)})"
