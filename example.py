"""Example: in-memory topic routing with + and # wildcards."""

import logging

from topictree import (
    DefaultPublisher,
    DefaultSubscriber,
    InvalidTopic,
    RecordingSubscriber,
    TopicTree,
)

logging.basicConfig(level=logging.INFO)


def main() -> None:
    tree = TopicTree()

    bedroom = DefaultSubscriber("bedroom-sensors")
    temperatures = RecordingSubscriber("all-temperatures")
    everything = RecordingSubscriber("home-audit")

    for pattern, subscriber in (
        ("/home/bedroom/+", bedroom),
        ("/home/+/temperature", temperatures),
        ("/home/#", everything),
    ):
        tree.subscribe(pattern, subscriber)
        subscriber.on_subscribe(pattern)

    publisher = DefaultPublisher("thermostat-1", tree)
    publisher.publish("/home/bedroom/temperature", 21.5)
    publisher.publish("/home/garage/temperature", 12.0)
    publisher.publish("/home/bedroom/humidity", 40)
    publisher.publish("/office/desk/temperature", 23.0)

    try:
        publisher.publish("/home/+/temperature", 0)
    except InvalidTopic as e:
        print(f"rejected: {e}")

    print("temperatures:", temperatures.messages)
    print("home audit:", len(everything), "messages")
    print("stats:", tree.stats())


if __name__ == "__main__":
    main()
