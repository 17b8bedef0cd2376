"""
Tests for desktop notifications (cuttlebelle/notify.py).

Covers the gating rules (silent flag and watch mode), payload serialization,
and the per-platform notifier commands. The notifier process itself is never
launched: subprocess.Popen is patched out.
"""

import json
import os
from unittest.mock import MagicMock, patch

import pytest

from cuttlebelle.notify import ICON, TITLE, Notify, send_notification
from cuttlebelle.state import NotifyConfig


def make_notify(silent: bool, watching: bool):
    send = MagicMock()
    return Notify(NotifyConfig(silent=silent), lambda: watching, send=send), send


class TestGating:
    @pytest.mark.parametrize("watching", [True, False])
    def test_silent_never_dispatches(self, watching):
        notify, send = make_notify(silent=True, watching=watching)
        notify.info("x")
        send.assert_not_called()

    @pytest.mark.parametrize("silent", [True, False])
    def test_not_watching_never_dispatches(self, silent):
        notify, send = make_notify(silent=silent, watching=False)
        notify.info("x")
        send.assert_not_called()

    def test_dispatches_when_watching_and_not_silent(self):
        notify, send = make_notify(silent=False, watching=True)
        notify.info("x")
        send.assert_called_once_with(TITLE, "x", ICON)

    def test_watch_signal_is_read_at_call_time(self):
        state = {"running": False}
        send = MagicMock()
        notify = Notify(NotifyConfig(), lambda: state["running"], send=send)

        notify.info("before")
        state["running"] = True
        notify.info("after")

        send.assert_called_once_with(TITLE, "after", ICON)

    def test_silent_flag_is_read_at_call_time(self):
        config = NotifyConfig(silent=False)
        send = MagicMock()
        notify = Notify(config, lambda: True, send=send)

        config.silent = True
        notify.info("x")

        send.assert_not_called()


class TestPayload:
    def test_dict_is_serialized_to_json(self):
        notify, send = make_notify(silent=False, watching=True)
        notify.info({"file": "index.yml", "line": 3})
        message = send.call_args[0][1]
        assert json.loads(message) == {"file": "index.yml", "line": 3}

    def test_list_is_serialized_to_json(self):
        notify, send = make_notify(silent=False, watching=True)
        notify.info(["a", "b"])
        assert send.call_args[0][1] == '["a", "b"]'

    def test_exception_uses_its_message(self):
        notify, send = make_notify(silent=False, watching=True)
        notify.info(RuntimeError("layout missing"))
        assert send.call_args[0][1] == "layout missing"

    def test_title_and_icon(self):
        assert TITLE == "Cuttlebelle"
        assert ICON.endswith(os.path.join("assets", "logo.png"))
        assert os.path.isabs(ICON)


class TestSendNotification:
    @patch("cuttlebelle.notify.subprocess.Popen")
    @patch("cuttlebelle.notify.platform.system", return_value="Linux")
    def test_linux_uses_notify_send(self, mock_system, mock_popen):
        send_notification("Cuttlebelle", "Build done", "/tmp/logo.png")
        command = mock_popen.call_args[0][0]
        assert command == ["notify-send", "--icon", "/tmp/logo.png", "Cuttlebelle", "Build done"]

    @patch("cuttlebelle.notify.subprocess.Popen")
    @patch("cuttlebelle.notify.platform.system", return_value="Darwin")
    def test_macos_uses_osascript(self, mock_system, mock_popen):
        send_notification("Cuttlebelle", 'say "hi"', "/tmp/logo.png")
        command = mock_popen.call_args[0][0]
        assert command[:2] == ["osascript", "-e"]
        assert 'display notification "say \\"hi\\"" with title "Cuttlebelle"' == command[2]

    @patch("cuttlebelle.notify.subprocess.Popen")
    @patch("cuttlebelle.notify.platform.system", return_value="Windows")
    def test_unsupported_platform_is_skipped(self, mock_system, mock_popen):
        send_notification("Cuttlebelle", "Build done", "/tmp/logo.png")
        mock_popen.assert_not_called()

    @patch("cuttlebelle.notify.subprocess.Popen", side_effect=FileNotFoundError("notify-send"))
    @patch("cuttlebelle.notify.platform.system", return_value="Linux")
    def test_missing_notifier_warns_without_raising(self, mock_system, mock_popen, err):
        send_notification("Cuttlebelle", "Build done", "/tmp/logo.png", console=err)
        assert "Warning: Notification failed" in err.file.getvalue()
