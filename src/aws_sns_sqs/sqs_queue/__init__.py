"""
Package: sqs_queue
Description: SQS message queue operations.

Provides an async client for sending, receiving and deleting queue
messages with per-client defaults.
"""
