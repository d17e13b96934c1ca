"""
This module defines the API versions exposed by the application.
"""

from enum import Enum


class ApiVersion(Enum):
    V1 = "v1"
