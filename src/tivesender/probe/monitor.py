# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""Owned probe state with debounced re-probing on configuration changes."""

from __future__ import annotations

import asyncio
import logging
from collections.abc import Callable

from ..http.client import HttpClient
from ..models.probe import CredentialStatus, ProbeResult
from .credential import probe_credential
from .debounce import Debouncer
from .reachability import probe_reachability

logger = logging.getLogger(__name__)


class ProbeMonitor:
    """
    Keeps the latest reachability and API key verdicts for one endpoint/key pair.

    ``update`` re-probes only what the change affects (the endpoint governs both
    probes, the key governs only validation) after the quiet period. ``test_now``
    re-probes both immediately. Each probe has its own debouncer, so a newer input
    cancels only the pending or running probe of the same kind.
    """

    def __init__(
        self,
        client: HttpClient,
        *,
        delay: float = 0.5,
        on_change: Callable[["ProbeMonitor"], None] | None = None,
    ):
        self.client = client
        self.on_change = on_change
        self.endpoint: str | None = None
        self.credential: str | None = None
        self.reachability: ProbeResult = ProbeResult.disconnected("API URL not set")
        self.credential_status: CredentialStatus = CredentialStatus.unknown("API Key not provided")
        self._reachability_debouncer = Debouncer(delay)
        self._credential_debouncer = Debouncer(delay)

    def update(self, endpoint: str | None, credential: str | None) -> None:
        endpoint_changed = endpoint != self.endpoint
        credential_changed = credential != self.credential
        self.endpoint = endpoint
        self.credential = credential

        if endpoint_changed:
            self._reachability_debouncer.schedule((endpoint,), lambda: self._run_reachability(endpoint))
        if endpoint_changed or credential_changed:
            self._credential_debouncer.schedule(
                (endpoint, credential),
                lambda: self._run_credential(endpoint, credential),
            )

    def test_now(self) -> None:
        endpoint, credential = self.endpoint, self.credential
        self._reachability_debouncer.trigger((endpoint,), lambda: self._run_reachability(endpoint))
        self._credential_debouncer.trigger(
            (endpoint, credential),
            lambda: self._run_credential(endpoint, credential),
        )

    async def wait(self) -> tuple[ProbeResult, CredentialStatus]:
        await asyncio.gather(self._reachability_debouncer.wait(), self._credential_debouncer.wait())
        return self.reachability, self.credential_status

    def cancel(self) -> None:
        self._reachability_debouncer.cancel()
        self._credential_debouncer.cancel()

    async def _run_reachability(self, endpoint: str | None) -> ProbeResult:
        self._set(reachability=ProbeResult.checking())
        result = await probe_reachability(self.client, endpoint)
        self._set(reachability=result)
        return result

    async def _run_credential(self, endpoint: str | None, credential: str | None) -> CredentialStatus:
        self._set(credential_status=CredentialStatus.checking())
        status = await probe_credential(self.client, endpoint, credential)
        self._set(credential_status=status)
        return status

    def _set(
        self,
        *,
        reachability: ProbeResult | None = None,
        credential_status: CredentialStatus | None = None,
    ) -> None:
        if reachability is not None:
            self.reachability = reachability
        if credential_status is not None:
            self.credential_status = credential_status
        if self.on_change is not None:
            try:
                self.on_change(self)
            except Exception:  # noqa: BLE001
                logger.exception("Probe state listener failed")


__all__ = ["ProbeMonitor"]
