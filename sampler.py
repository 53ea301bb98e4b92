class SlotSet:
    """
    A set that can remove a uniformly random member in expected O(1).

    Members live in a list of slots, where a removed member leaves an empty slot behind.
    Picking a random slot until an occupied one is hit is then unbiased,
    and costs capacity / len(self) probes on average,
    which compact() keeps bounded by removing the empty slots.
    """

    _EMPTY = object()

    def __init__(self, items=()):
        self._slots = []
        self._slot_of = {}

        for item in items:
            self.add(item)

    def __len__(self):
        return len(self._slot_of)

    def __contains__(self, item):
        return item in self._slot_of

    def __iter__(self):
        return (slot for slot in self._slots if slot is not self._EMPTY)

    @property
    def capacity(self):
        return len(self._slots)

    def add(self, item):
        if item in self._slot_of:
            return

        self._slot_of[item] = len(self._slots)
        self._slots.append(item)

    def discard(self, item):
        slot = self._slot_of.pop(item, None)
        if slot is not None:
            self._slots[slot] = self._EMPTY

    def compact(self):
        # Members keep their relative order, so sampling stays reproducible
        self._slots = list(self)
        self._slot_of = {item: slot for slot, item in enumerate(self._slots)}

    def remove_random(self, rng):
        """
        Removes and returns a uniformly random member,
        or returns None if the set is empty.

        rng is a numpy.random.Generator.
        """
        if not self._slot_of:
            return None

        if self.capacity >= 8 and len(self) < self.capacity / 4:
            self.compact()

        while True:
            slot = int(rng.integers(0, self.capacity))
            item = self._slots[slot]

            if item is not self._EMPTY:
                self.discard(item)
                return item
