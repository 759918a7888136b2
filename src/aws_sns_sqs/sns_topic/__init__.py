"""
Package: sns_topic
Description: SNS topic operations.

Provides an async client for publishing to topics with per-client
defaults.
"""
