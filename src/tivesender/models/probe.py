# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Reachability and credential probe outcomes."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class ProbeState(str, Enum):
    CHECKING = "CHECKING"
    CONNECTED = "CONNECTED"
    DISCONNECTED = "DISCONNECTED"


class CredentialState(str, Enum):
    CHECKING = "CHECKING"
    VALID = "VALID"
    INVALID = "INVALID"
    UNKNOWN = "UNKNOWN"


@dataclass(frozen=True)
class ProbeResult:
    """Endpoint reachability plus a human-readable diagnostic."""

    state: ProbeState
    message: str = ""

    @classmethod
    def checking(cls) -> ProbeResult:
        return cls(ProbeState.CHECKING, "Checking...")

    @classmethod
    def connected(cls, message: str) -> ProbeResult:
        return cls(ProbeState.CONNECTED, message)

    @classmethod
    def disconnected(cls, message: str) -> ProbeResult:
        return cls(ProbeState.DISCONNECTED, message)

    def to_dict(self) -> dict[str, str]:
        return {"state": self.state.value, "message": self.message}


@dataclass(frozen=True)
class CredentialStatus:
    """
    API key validity plus a human-readable diagnostic.

    UNKNOWN means there was not enough signal to decide (no key supplied, or a
    connectivity failure unrelated to authentication).
    """

    state: CredentialState
    message: str = ""

    @classmethod
    def checking(cls) -> CredentialStatus:
        return cls(CredentialState.CHECKING, "Validating...")

    @classmethod
    def valid(cls, message: str) -> CredentialStatus:
        return cls(CredentialState.VALID, message)

    @classmethod
    def invalid(cls, message: str) -> CredentialStatus:
        return cls(CredentialState.INVALID, message)

    @classmethod
    def unknown(cls, message: str) -> CredentialStatus:
        return cls(CredentialState.UNKNOWN, message)

    def to_dict(self) -> dict[str, str]:
        return {"state": self.state.value, "message": self.message}
