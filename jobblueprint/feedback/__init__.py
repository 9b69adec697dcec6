"""
Feedback subsystem.

`record_feedback` validates the target item and hands a
`FeedbackEvent` to a `FeedbackSink`.  Implement a new sink to forward
feedback to an external service.
"""

from .sink import FeedbackEvent, FeedbackSink, LocalFeedbackSink, record_feedback  # noqa: F401
