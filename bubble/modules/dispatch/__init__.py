"""
Dispatch Module - Black Box Interface

Purpose: Look up a configured command and enqueue it for Poppit
Interface: Dispatcher.dispatch()
Hidden: Lookup rules, notification construction, error mapping
"""

from .dispatcher import Dispatcher

__all__ = ["Dispatcher"]
