# working_set.py

MIN_WORKING_SET = 4
MAX_WORKING_SET = 20

NOT_FOUND = -1


def check_size(size):
    """Raise ValueError unless size is an int within [4, 20]."""
    if isinstance(size, bool) or not isinstance(size, int):
        raise ValueError(f"Working set size must be an int, got {size!r}")
    if not MIN_WORKING_SET <= size <= MAX_WORKING_SET:
        raise ValueError(
            f"Working set size must be in [{MIN_WORKING_SET}, {MAX_WORKING_SET}], got {size}"
        )
    return size


def find_index(values, value):
    for i, v in enumerate(values):
        if v == value:
            return i
    return NOT_FOUND


def min_index(values):
    # first minimum wins on ties
    best = 0
    for i in range(1, len(values)):
        if values[i] < values[best]:
            best = i
    return best


def shift_append(values, start, value):
    """Drop values[start], shift everything after it one slot left, put value last."""
    for i in range(start + 1, len(values)):
        values[i - 1] = values[i]
    values[-1] = value


class WorkingSet:
    """
    Fixed-capacity list of resident pages with one metadata value per slot.
    Slots are None until filled. Metadata is whatever the policy needs:
    last-use stamps for LRU, use-bits for Clock, nothing for FIFO.
    """

    def __init__(self, capacity, initial_meta=0):
        self.capacity = check_size(capacity)
        self.pages = [None] * capacity
        self.meta  = [initial_meta] * capacity

    def find(self, page):
        return find_index(self.pages, page)

    def refresh(self, slot, page, meta=0):
        self.pages[slot] = page
        self.meta[slot]  = meta

    def evict_and_insert(self, slot, page, meta=0):
        # pages and metadata are compacted together so they never drift apart
        evicted = self.pages[slot]
        shift_append(self.pages, slot, page)
        shift_append(self.meta, slot, meta)
        return evicted

    def oldest(self):
        return min_index(self.meta)

    def __contains__(self, page):
        return self.find(page) != NOT_FOUND

    def __len__(self):
        return sum(1 for p in self.pages if p is not None)

    def __iter__(self):
        return iter(self.pages)

    def __repr__(self):
        return f"WorkingSet(pages={self.pages}, meta={self.meta})"
