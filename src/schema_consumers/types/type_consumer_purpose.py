# SPDX-License-Identifier: MIT
# Copyright (c) 2025 OmniNode Team
"""Consumer purpose type.

Purposes are an open set: any string names a purpose and the registry needs
no change to support a new one. ``ConsumerPurpose`` is a distinct type so
purposes are not confused with consumer names or annotation names in
signatures, without closing the set the way an enum would.
"""

from __future__ import annotations

from typing import NewType

ConsumerPurpose = NewType("ConsumerPurpose", str)

__all__ = ["ConsumerPurpose"]
