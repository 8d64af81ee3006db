"""
Event system for the twentyone engine.

This package lets front ends follow a round as a stream of events.
"""

from twentyone.events.emitter import EngineEventType, EventBus, EventEmitter

__all__ = ["EventEmitter", "EventBus", "EngineEventType"]
