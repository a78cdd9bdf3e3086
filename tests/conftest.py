"""Shared pytest fixtures for the logevent test suite."""

from __future__ import annotations

import json

import pytest

from logevent.config import Config
from logevent.parser import JsonLogEventParser, YamlLogEventParser

FULL_EVENT_YAML = (
    "---\n"
    "timeMillis: 1493121664118\n"
    "thread: \"main\"\n"
    "level: \"INFO\"\n"
    "loggerName: \"HelloWorld\"\n"
    "marker:\n"
    " name: \"child\"\n"
    " parents:\n"
    " - name: \"parent\"\n"
    "   parents:\n"
    "   - name: \"grandparent\"\n"
    "message: \"Hello, world!\"\n"
    "thrown:\n"
    " commonElementCount: 0\n"
    " message: \"error message\"\n"
    " name: \"java.lang.RuntimeException\"\n"
    " extendedStackTrace:\n"
    " - class: \"logtest.Main\"\n"
    "   method: \"main\"\n"
    "   file: \"Main.java\"\n"
    "   line: 29\n"
    "   exact: true\n"
    "   location: \"classes/\"\n"
    "   version: \"?\"\n"
    "contextStack:\n"
    "- \"one\"\n"
    "- \"two\"\n"
    "endOfBatch: false\n"
    "loggerFqcn: \"org.apache.logging.log4j.spi.AbstractLogger\"\n"
    "contextMap:\n"
    " bar: \"BAR\"\n"
    " foo: \"FOO\"\n"
    "threadId: 1\n"
    "threadPriority: 5\n"
    "source:\n"
    " class: \"logtest.Main\"\n"
    " method: \"main\"\n"
    " file: \"Main.java\"\n"
    " line: 29"
)

FULL_EVENT_DICT: dict = {
    "timeMillis": 1493121664118,
    "thread": "main",
    "level": "INFO",
    "loggerName": "HelloWorld",
    "marker": {
        "name": "child",
        "parents": [{"name": "parent", "parents": [{"name": "grandparent"}]}],
    },
    "message": "Hello, world!",
    "thrown": {
        "commonElementCount": 0,
        "message": "error message",
        "name": "java.lang.RuntimeException",
        "extendedStackTrace": [
            {
                "class": "logtest.Main",
                "method": "main",
                "file": "Main.java",
                "line": 29,
                "exact": True,
                "location": "classes/",
                "version": "?",
            }
        ],
    },
    "contextStack": ["one", "two"],
    "endOfBatch": False,
    "loggerFqcn": "org.apache.logging.log4j.spi.AbstractLogger",
    "contextMap": {"bar": "BAR", "foo": "FOO"},
    "threadId": 1,
    "threadPriority": 5,
    "source": {
        "class": "logtest.Main",
        "method": "main",
        "file": "Main.java",
        "line": 29,
    },
}


def assert_full_event(event) -> None:
    """Check every field of the decoded reference event."""
    assert event.time_millis == 1493121664118
    assert event.thread == "main"
    assert event.level.name == "INFO"
    assert event.logger_name == "HelloWorld"
    assert event.marker.parents[0].parents[0].name == "grandparent"
    assert event.message == "Hello, world!"
    assert event.thrown.common_element_count == 0
    assert event.thrown.message == "error message"
    assert event.thrown.name == "java.lang.RuntimeException"
    frame = event.thrown.extended_stack_trace[0]
    assert frame.class_name == "logtest.Main"
    assert frame.method == "main"
    assert frame.file == "Main.java"
    assert frame.line == 29
    assert frame.exact is True
    assert frame.location == "classes/"
    assert frame.version == "?"
    assert list(event.context_stack) == ["one", "two"]
    assert event.end_of_batch is False
    assert event.logger_fqcn == "org.apache.logging.log4j.spi.AbstractLogger"
    assert dict(event.context_map) == {"bar": "BAR", "foo": "FOO"}
    assert event.thread_id == 1
    assert event.thread_priority == 5
    assert event.source.class_name == "logtest.Main"
    assert event.source.method == "main"
    assert event.source.file == "Main.java"
    assert event.source.line == 29


@pytest.fixture()
def full_event_yaml() -> str:
    """Return the reference event serialized as YAML."""
    return FULL_EVENT_YAML


@pytest.fixture()
def full_event_json() -> str:
    """Return the reference event serialized as JSON."""
    return json.dumps(FULL_EVENT_DICT, indent=2)


@pytest.fixture()
def full_event_dict() -> dict:
    """Return a fresh copy of the reference event document tree."""
    return json.loads(json.dumps(FULL_EVENT_DICT))


@pytest.fixture()
def yaml_parser() -> YamlLogEventParser:
    return YamlLogEventParser()


@pytest.fixture()
def json_parser() -> JsonLogEventParser:
    return JsonLogEventParser(Config(input_format="json"))
