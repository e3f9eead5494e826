# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Payload submission and outcome history."""

from .dispatcher import Dispatcher, result_from_response
from .history import History

__all__ = ["Dispatcher", "History", "result_from_response"]
