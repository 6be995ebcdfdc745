from .base import Device


class Light(Device):
    kind = "Light"


class Television(Device):
    kind = "TV"
