"""
Service layer.

Each service wraps one area of the feed (accounts, posts, comments)
and receives the ``Database`` handle it works against when it is
constructed.  Services raise the errors from ``core.errors``; turning
them into JSON envelopes is the job of the endpoint modules.
"""
