"""In-process publish/subscribe routing over a "/"-delimited topic tree with + and # wildcards."""

from topictree.config import Settings, get_settings, load_settings
from topictree.delivery import Delivery
from topictree.exceptions import InvalidPattern, InvalidTopic
from topictree.node import TopicNode
from topictree.tree import TopicTree
from topictree.validation import validate, validate_topic
from topictree.subscriber import Subscriber
from topictree.publisher import Publisher
from topictree.default_publisher import DefaultPublisher
from topictree.default_subscriber import DefaultSubscriber
from topictree.recorder import RecordingSubscriber

__all__ = [
    "Settings",
    "load_settings",
    "get_settings",
    "Delivery",
    "InvalidTopic",
    "InvalidPattern",
    "TopicNode",
    "TopicTree",
    "validate",
    "validate_topic",
    "Subscriber",
    "Publisher",
    "DefaultPublisher",
    "DefaultSubscriber",
    "RecordingSubscriber",
]
