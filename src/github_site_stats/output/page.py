"""In-memory page of named presentation slots."""

from dataclasses import dataclass, field


@dataclass
class Slot:
    """A named element the renderer can write text or markup into."""

    id: str
    text: str = ""
    html: str = ""


@dataclass
class Page:
    """The set of slots available to the renderer.

    Slots that are not on the page are simply absent; renderers check with
    :meth:`get` and skip the update.
    """

    slots: dict[str, Slot] = field(default_factory=dict)

    @classmethod
    def with_slots(cls, *slot_ids: str) -> "Page":
        return cls(slots={slot_id: Slot(id=slot_id) for slot_id in slot_ids})

    def get(self, slot_id: str) -> Slot | None:
        return self.slots.get(slot_id)

    def __contains__(self, slot_id: str) -> bool:
        return slot_id in self.slots
