"""
Module: test_merge.py
Description: Unit tests for option merging.

Covers override and append behaviour for scalar, mapping and sequence
fields, and checks that neither input is modified.
"""

from aws_sns_sqs.models.options import (
    MessageAttributeValue,
    PublishOptions,
    ReceiveOptions,
    SendOptions,
    default_receive_options,
)
from aws_sns_sqs.options.merge import merge_options


def attrs(**values):
    return {name: MessageAttributeValue.string(value) for name, value in values.items()}


class TestMergeWithoutAppend:
    """Merging with append mode off."""

    def test_no_call_options_returns_defaults(self):
        defaults = SendOptions(delay_seconds=10)

        assert merge_options(None, defaults, append_attributes=False) is defaults
        assert merge_options(None, defaults, append_attributes=True) is defaults

    def test_no_defaults_returns_call_options(self):
        options = SendOptions(delay_seconds=3)

        assert merge_options(options, None) is options

    def test_non_zero_call_fields_win(self):
        defaults = SendOptions(
            delay_seconds=10,
            message_attributes={"a": "default"},
            message_group_id="default-group",
            message_deduplication_id="default-dedup",
            timeout=9.0
        )
        options = SendOptions(
            delay_seconds=1,
            message_attributes={"b": "call"},
            message_group_id="call-group",
            message_deduplication_id="call-dedup",
            timeout=2.0
        )

        effective = merge_options(options, defaults)

        assert effective.delay_seconds == 1
        assert effective.message_attributes == attrs(b="call")
        assert effective.message_group_id == "call-group"
        assert effective.message_deduplication_id == "call-dedup"
        assert effective.timeout == 2.0

    def test_zero_call_fields_take_defaults(self):
        defaults = SendOptions(
            delay_seconds=10,
            message_attributes={"a": "default"},
            message_system_attributes={"AWSTraceHeader": "Root=1"},
            message_group_id="default-group",
            timeout=9.0
        )
        options = SendOptions(delay_seconds=0, message_group_id="")

        effective = merge_options(options, defaults)

        assert effective.delay_seconds == 10
        assert effective.message_attributes == attrs(a="default")
        assert effective.message_system_attributes == attrs(AWSTraceHeader="Root=1")
        assert effective.message_group_id == "default-group"
        assert effective.message_deduplication_id is None
        assert effective.timeout == 9.0

    def test_call_collections_replace_defaults(self):
        defaults = ReceiveOptions(message_attribute_names=["y", "z"])
        options = ReceiveOptions(message_attribute_names=["x"])

        effective = merge_options(options, defaults)

        assert effective.message_attribute_names == ["x"]

    def test_receive_defaults_fill_unset_fields(self):
        options = ReceiveOptions(visibility_timeout=30)

        effective = merge_options(options, default_receive_options())

        assert effective.visibility_timeout == 30
        assert effective.max_number_of_messages == 1
        assert effective.wait_time_seconds == 20
        assert effective.message_attribute_names == ["All"]
        assert effective.message_system_attribute_names == ["All"]


class TestMergeWithAppend:
    """Merging with append mode on."""

    def test_mapping_defaults_overwrite_colliding_keys(self):
        defaults = PublishOptions(message_attributes={"a": "2", "b": "3"})
        options = PublishOptions(message_attributes={"a": "1"})

        effective = merge_options(options, defaults, append_attributes=True)

        assert effective.message_attributes == attrs(a="2", b="3")

    def test_mapping_keeps_call_only_keys(self):
        defaults = SendOptions(message_system_attributes={"AWSTraceHeader": "Root=d"})
        options = SendOptions(message_system_attributes={"Custom": "c"})

        effective = merge_options(options, defaults, append_attributes=True)

        assert effective.message_system_attributes == attrs(Custom="c", AWSTraceHeader="Root=d")

    def test_sequence_defaults_appended_in_order(self):
        defaults = ReceiveOptions(message_attribute_names=["y", "z"])
        options = ReceiveOptions(message_attribute_names=["x"])

        effective = merge_options(options, defaults, append_attributes=True)

        assert effective.message_attribute_names == ["x", "y", "z"]

    def test_sequence_duplicates_are_kept(self):
        defaults = ReceiveOptions(message_system_attribute_names=["All"])
        options = ReceiveOptions(message_system_attribute_names=["All", "SenderId"])

        effective = merge_options(options, defaults, append_attributes=True)

        assert effective.message_system_attribute_names == ["All", "SenderId", "All"]

    def test_scalars_unaffected_by_append(self):
        defaults = SendOptions(delay_seconds=10, message_group_id="d")
        options = SendOptions(delay_seconds=1, message_group_id="c")

        effective = merge_options(options, defaults, append_attributes=True)

        assert effective.delay_seconds == 1
        assert effective.message_group_id == "c"

    def test_zero_call_collection_takes_defaults(self):
        defaults = PublishOptions(message_attributes={"a": "2"})
        options = PublishOptions(message_attributes={})

        effective = merge_options(options, defaults, append_attributes=True)

        assert effective.message_attributes == attrs(a="2")


class TestMergePurity:
    """Merging never modifies its inputs."""

    def test_inputs_unchanged_after_append(self):
        defaults = SendOptions(message_attributes={"x": "0", "y": "2"}, timeout=3.0)
        options = SendOptions(message_attributes={"x": "1"})

        effective = merge_options(options, defaults, append_attributes=True)

        assert effective is not options
        assert options.message_attributes == attrs(x="1")
        assert options.timeout is None
        assert defaults.message_attributes == attrs(x="0", y="2")

    def test_sequences_are_not_shared_with_defaults(self):
        defaults = ReceiveOptions(message_attribute_names=["All"])
        options = ReceiveOptions(max_number_of_messages=5)

        effective = merge_options(options, defaults, append_attributes=True)
        effective.message_attribute_names.append("extra")

        assert defaults.message_attribute_names == ["All"]
