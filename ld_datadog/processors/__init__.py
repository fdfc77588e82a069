"""Processors that turn decoded notifications into outbound documents."""

from .event_builder import build_event

__all__ = ['build_event']
