from unittest.mock import MagicMock, patch

import requests

from chelto.core import config
from chelto.services.monitor_service import notify_monitor


def test_skipped_without_credentials(monkeypatch):
    monkeypatch.setattr(config, "MONITOR_BOT_TOKEN", None)
    with patch("chelto.services.monitor_service.requests.post") as post:
        assert notify_monitor("hello") is False
    post.assert_not_called()


def test_posts_html_message(monkeypatch):
    monkeypatch.setattr(config, "MONITOR_BOT_TOKEN", "123:abc")
    monkeypatch.setattr(config, "MONITOR_CHAT_ID", "-100")
    with patch("chelto.services.monitor_service.requests.post", return_value=MagicMock()) as post:
        assert notify_monitor("<b>hi</b>") is True

    url = post.call_args.args[0]
    assert url == "https://api.telegram.org/bot123:abc/sendMessage"
    assert post.call_args.kwargs["json"] == {"chat_id": "-100", "text": "<b>hi</b>", "parse_mode": "HTML"}


def test_failure_is_swallowed(monkeypatch):
    monkeypatch.setattr(config, "MONITOR_BOT_TOKEN", "123:abc")
    monkeypatch.setattr(config, "MONITOR_CHAT_ID", "-100")
    with patch(
        "chelto.services.monitor_service.requests.post",
        side_effect=requests.ConnectionError("offline"),
    ):
        assert notify_monitor("hello") is False
