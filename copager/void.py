"""An intermediate representation that keeps nothing."""

from dataclasses import dataclass

from copager.ir import IRBuilder


@dataclass(frozen=True)
class Void:
    """The empty result: parsing succeeded and nothing was kept."""


class VoidBuilder(IRBuilder):
    """Ignores every event and builds :class:`Void`."""

    def on_read(self, token):
        return None

    def on_parse(self, rule, length):
        return None

    def build(self):
        return Void()