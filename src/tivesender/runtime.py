# SPDX-FileCopyrightText: 2025 Theori Inc.
# SPDX-License-Identifier: AGPL-3.0-or-later

"""High-level TiveSender facade wiring probes, dispatch and persistence."""

from __future__ import annotations

from contextlib import suppress

from .config import SenderSettings, load_settings
from .dispatch import Dispatcher, History
from .http.client import HttpClient, create_default_http_client
from .models import CredentialStatus, DispatchResult, ProbeResult
from .payloads import format_payload, synthesize_from_text
from .probe import ProbeMonitor, probe_credential, probe_reachability
from .store import ConfigStore


class TiveSender:
    """
    Convenience wrapper that shares one HTTP client across probes and submissions.

    The endpoint and API key are read from the config store at construction and only
    written back by ``save_config``/``clear_config``.
    """

    def __init__(
        self,
        http_client: HttpClient | None = None,
        *,
        settings: SenderSettings | None = None,
        store: ConfigStore | None = None,
    ):
        self.settings = settings or load_settings()
        self.http_client = http_client or create_default_http_client(self.settings)
        self.store = store or ConfigStore(self.settings.config_path, self.settings.default_endpoint)
        stored = self.store.load()
        self.endpoint: str = stored.endpoint
        self.credential: str = stored.credential
        self.history = History(limit=self.settings.history_limit)
        self.dispatcher = Dispatcher(self.http_client, self.history)
        self.monitor = ProbeMonitor(self.http_client, delay=self.settings.debounce_seconds)

    def configure(self, endpoint: str | None = None, credential: str | None = None) -> None:
        """
        Change the in-memory endpoint/key; probes re-run after the quiet period.

        Must be called from a running event loop.
        """
        if endpoint is not None:
            self.endpoint = endpoint
        if credential is not None:
            self.credential = credential
        self.monitor.update(self.endpoint, self.credential)

    async def probe_reachability(self) -> ProbeResult:
        return await probe_reachability(self.http_client, self.endpoint)

    async def probe_credential(self) -> CredentialStatus:
        return await probe_credential(self.http_client, self.endpoint, self.credential)

    async def check(self) -> tuple[ProbeResult, CredentialStatus]:
        """Run both probes now, bypassing the quiet period."""
        self.monitor.update(self.endpoint, self.credential)
        self.monitor.test_now()
        return await self.monitor.wait()

    async def send(self, record_text: str) -> DispatchResult:
        return await self.dispatcher.dispatch(self.endpoint, self.credential, record_text)

    def generate(self, record_text: str | None = "") -> str:
        """Randomize the given editor text (or the default sample) and format it."""
        return format_payload(synthesize_from_text(record_text))

    def save_config(self) -> None:
        self.store.save(self.endpoint, self.credential)

    def clear_config(self) -> None:
        stored = self.store.clear()
        self.endpoint, self.credential = stored.endpoint, stored.credential

    async def aclose(self) -> None:
        self.monitor.cancel()
        with suppress(Exception):
            await self.http_client.aclose()

    async def __aenter__(self) -> TiveSender:
        return self

    async def __aexit__(self, _exc_type, _exc, _tb) -> None:  # noqa: ANN001
        await self.aclose()
