"""Unit tests for testing fakes and fixtures."""
from __future__ import annotations

import asyncio

import pytest

from datasource_picker.application.export import ResultSet
from datasource_picker.application.files import FileDelivery
from datasource_picker.application.host import DashboardHost, DialogChannel, SettingsStore
from datasource_picker.application.session import PopupSession
from datasource_picker.testing.fakes import (
    FailingFileDelivery,
    FakeDialogChannel,
    InMemoryDashboardHost,
    InMemorySettingsStore,
)


class TestInMemoryDashboardHost:
    def test_satisfies_protocol(self):
        assert isinstance(InMemoryDashboardHost(), DashboardHost)

    def test_with_sheets(self):
        host = InMemoryDashboardHost.with_sheets("a*", "b")
        assert [ws.name for ws in host.list_worksheets()] == ["a*", "b"]

    def test_summary_capped_and_recorded(self):
        async def _run():
            host = InMemoryDashboardHost().add_summary(
                "a*", ResultSet.from_values(["x"], [["1"], ["2"], ["3"]])
            )
            rs = await host.get_summary_data("a*", max_rows=2)
            assert len(rs.rows) == 2
            assert host.summary_calls == [("a*", 2)]
        asyncio.run(_run())

    def test_unknown_sheet_returns_empty_result(self):
        async def _run():
            rs = await InMemoryDashboardHost().get_summary_data("zzz", max_rows=5)
            assert rs.columns == () and rs.rows == ()
        asyncio.run(_run())

    def test_injected_errors(self):
        async def _run():
            host = InMemoryDashboardHost()
            host.list_error = RuntimeError("down")
            host.summary_error = RuntimeError("down")
            with pytest.raises(RuntimeError):
                host.list_worksheets()
            with pytest.raises(RuntimeError):
                await host.get_summary_data("a", max_rows=1)
        asyncio.run(_run())


class TestInMemorySettingsStore:
    def test_satisfies_protocol(self):
        assert isinstance(InMemorySettingsStore(), SettingsStore)

    def test_set_buffers_until_save(self):
        async def _run():
            store = InMemorySettingsStore()
            store.set("k", "v")
            assert store.get("k") == "v"
            assert "k" not in store.saved
            await store.save()
            assert store.saved == {"k": "v"}
            assert store.pending == {}
            assert store.save_count == 1
        asyncio.run(_run())

    def test_save_error_keeps_pending(self):
        async def _run():
            store = InMemorySettingsStore()
            store.set("k", "v")
            store.save_error = OSError("disk")
            with pytest.raises(OSError):
                await store.save()
            assert store.pending == {"k": "v"}
        asyncio.run(_run())


class TestFakeDialogChannel:
    def test_satisfies_protocol(self):
        assert isinstance(FakeDialogChannel(), DialogChannel)

    def test_open_and_close(self):
        async def _run():
            dialog = FakeDialogChannel("30")
            assert await dialog.open() == "30"
            dialog.close("30")
            assert dialog.closed is True
        asyncio.run(_run())


class TestFailingFileDelivery:
    def test_satisfies_protocol(self):
        assert isinstance(FailingFileDelivery(), FileDelivery)

    def test_records_attempt_and_raises(self):
        async def _run():
            d = FailingFileDelivery()
            with pytest.raises(PermissionError):
                await d.deliver(b"abc", "text/csv", "a.csv")
            assert d.attempts == [{"filename": "a.csv", "content_type": "text/csv", "size": 3}]
        asyncio.run(_run())


class TestFixtures:
    def test_popup_session_fixture(self, popup_session, fake_host, fake_dialog):
        async def _run():
            fake_host.worksheets = InMemoryDashboardHost.with_sheets("Sales*").worksheets
            checklist = await popup_session.open()
            assert [entry.name for entry in checklist] == ["Sales*"]
            assert popup_session.state.open_payload == "5"
        assert isinstance(popup_session, PopupSession)
        asyncio.run(_run())
