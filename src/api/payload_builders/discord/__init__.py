"""Payload builders do Discord."""

from .command import (
    CommandPayloadBuilder,
    build_command_patch_payload,
    build_command_payload,
    build_option_payload,
)

__all__ = [
    "CommandPayloadBuilder",
    "build_command_patch_payload",
    "build_command_payload",
    "build_option_payload",
]
