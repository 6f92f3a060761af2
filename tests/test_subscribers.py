"""Tests for subscriber and publisher helpers."""

import logging

import pytest

from topictree import (
    DefaultPublisher,
    DefaultSubscriber,
    Delivery,
    InvalidTopic,
    RecordingSubscriber,
    Subscriber,
)


class TestRecordingSubscriber:
    """Tests for RecordingSubscriber."""

    def test_records_in_arrival_order(self, tree, recorder):
        """Test that deliveries are kept in order with their topic."""
        tree.subscribe("/sensor/+", recorder)
        tree.publish("/sensor/a", 1)
        tree.publish("/sensor/b", 2)
        assert [d.topic for d in recorder.deliveries] == ["/sensor/a", "/sensor/b"]
        assert recorder.messages == [("/sensor/a", 1), ("/sensor/b", 2)]

    def test_clear(self, tree, recorder):
        """Test that clear drops recorded deliveries."""
        tree.subscribe("/x", recorder)
        tree.publish("/x", 1)
        recorder.clear()
        assert len(recorder) == 0

    def test_is_a_subscriber(self, recorder):
        """Test that the recorder can be called directly as a callback."""
        assert isinstance(recorder, Subscriber)
        recorder("/direct", "msg")
        assert recorder.messages == [("/direct", "msg")]
        assert repr(recorder) == "RecordingSubscriber(id='test-recorder')"


class TestDefaultSubscriber:
    """Tests for DefaultSubscriber logging."""

    def test_logs_message_received(self, tree, caplog):
        """Test that a received message is logged."""
        subscriber = DefaultSubscriber("logger-1")
        tree.subscribe("/log/#", subscriber)
        with caplog.at_level(logging.INFO, logger="topictree"):
            tree.publish("/log/app", {"level": "warn"})
        records = [r for r in caplog.records if r.getMessage() == "message_received"]
        assert len(records) == 1
        assert records[0].topic == "/log/app"
        assert records[0].payload_type == "dict"
        assert records[0].name == "topictree.subscriber.logger-1"

    def test_on_subscribe_logs(self, caplog):
        """Test the on_subscribe observability hook."""
        subscriber = DefaultSubscriber("logger-2")
        with caplog.at_level(logging.INFO, logger="topictree"):
            subscriber.on_subscribe("/log/#")
        assert any(
            r.getMessage() == "subscribed" and r.pattern == "/log/#" for r in caplog.records
        )


class TestDefaultPublisher:
    """Tests for DefaultPublisher."""

    def test_publish_returns_delivery_count(self, tree):
        """Test that publish reports how many subscribers received the message."""
        first = RecordingSubscriber("first")
        second = RecordingSubscriber("second")
        tree.subscribe("/home/+/temperature", first)
        tree.subscribe("/home/#", second)

        publisher = DefaultPublisher("thermostat", tree)
        assert publisher.publish("/home/bedroom/temperature", 20) == 2
        assert publisher.publish("/garden", 5) == 0
        assert publisher.tree is tree

    def test_publish_logs(self, tree, caplog):
        """Test that on_publish logs the delivery count."""
        publisher = DefaultPublisher("thermostat", tree)
        with caplog.at_level(logging.INFO, logger="topictree"):
            publisher.publish("/garden", 5)
        records = [r for r in caplog.records if r.getMessage() == "published"]
        assert records[0].deliveries == 0
        assert records[0].publisher_id == "thermostat"

    def test_invalid_topic_propagates(self, tree):
        """Test that InvalidTopic reaches the publisher's caller."""
        publisher = DefaultPublisher("thermostat", tree)
        with pytest.raises(InvalidTopic):
            publisher.publish("/home/#", 1)


def test_delivery_to_dict():
    """Test Delivery serialization."""
    delivery = Delivery(topic="/a", message=3)
    data = delivery.to_dict()
    assert data["topic"] == "/a"
    assert data["message"] == 3
    assert "received_at" in data
    assert delivery.as_tuple() == ("/a", 3)
