from loguru import logger

from src.core.commands import SimpleAction


class Device:
    """
    Switchable device with a single on/off flag.

    Subclasses only set ``kind``; it appears in log output.
    """
    kind = "Device"

    def __init__(self, name: str):
        self.name = name
        self.is_on = False

    def on(self):
        self.is_on = True
        logger.info(f"{self.name}: {self.kind} on")

    def off(self):
        self.is_on = False
        logger.info(f"{self.name}: {self.kind} off")

    def __repr__(self) -> str:
        state = "on" if self.is_on else "off"
        return f"<{type(self).__name__} {self.name!r} {state}>"


def on_action(device: Device) -> SimpleAction:
    """Action that switches the device on; its reverse switches it off."""
    return SimpleAction(device, "on", "off", f"{device.name} {device.kind} on")


def off_action(device: Device) -> SimpleAction:
    """Action that switches the device off; its reverse switches it on."""
    return SimpleAction(device, "off", "on", f"{device.name} {device.kind} off")
