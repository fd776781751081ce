# -*- coding: utf-8 -*-
"""
Тесты для scripts/competition/_services/slack_notifier.py
"""
import io
import json

import pytest
import requests

from core.utils.error_handler import NotifyError
from scripts.competition._services.slack_notifier import SlackNotifier

MESSAGE = {"text": "hello", "attachments": [{"color": "#00ff00", "text": ""}]}


class FakeResponse:
    def __init__(self, status_code=200, text="ok"):
        self.status_code = status_code
        self.text = text


class FakeSession:
    def __init__(self, response=None, error=None):
        self.response = response or FakeResponse()
        self.error = error
        self.posts = []

    def post(self, url, data=None, headers=None, timeout=None):
        self.posts.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        if self.error:
            raise self.error
        return self.response


def test_stdout_mode_writes_indented_json():
    stream = io.StringIO()
    notifier = SlackNotifier(webhook_url="", stream=stream)
    assert notifier.send(MESSAGE) is True
    output = stream.getvalue()
    assert output.endswith("}\n")
    assert json.loads(output) == MESSAGE
    assert '\n "text": "hello"' in output


def test_stdout_mode_defaults_to_sys_stdout(capsys):
    SlackNotifier().send(MESSAGE)
    assert json.loads(capsys.readouterr().out) == MESSAGE


def test_post_success():
    session = FakeSession()
    notifier = SlackNotifier(webhook_url="https://hooks.example.com/T/B/X", timeout=3, session=session)
    assert notifier.send(MESSAGE) is True

    post = session.posts[0]
    assert post["url"] == "https://hooks.example.com/T/B/X"
    assert post["headers"] == {"Content-Type": "application/json"}
    assert post["timeout"] == 3
    assert json.loads(post["data"].decode("utf-8")) == MESSAGE


def test_non_200_raises():
    session = FakeSession(FakeResponse(status_code=404, text="no_service"))
    notifier = SlackNotifier(webhook_url="https://hooks.example.com/x", session=session)
    with pytest.raises(NotifyError) as excinfo:
        notifier.send(MESSAGE)
    assert excinfo.value.context["status"] == 404


def test_transport_error_raises():
    session = FakeSession(error=requests.Timeout("slow"))
    notifier = SlackNotifier(webhook_url="https://hooks.example.com/x", session=session)
    with pytest.raises(NotifyError):
        notifier.send(MESSAGE)
