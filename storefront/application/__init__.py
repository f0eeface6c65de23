# SPDX-License-Identifier: Apache-2.0
# Copyright 2025 Vova Orig

from .interfaces import CatalogPort
from .services.session_gate import SessionGate, SessionGrant

__all__ = [
    "CatalogPort",
    "SessionGate",
    "SessionGrant",
]
