"""Example actuators driven through dispatcher actions."""
from .base import Device, on_action, off_action
from .appliances import Light, Television

__all__ = ["Device", "Light", "Television", "on_action", "off_action"]
