from working_set import NOT_FOUND, WorkingSet, check_size

# Every policy fills slot t for the first k references without counting a
# fault, then starts replacing. Policies only ever touch their own WorkingSet.


# ─── 1. LRU ───────────────────────────────────────────────────────────────────
class LRUPolicy:
    """Evicts the slot with the oldest last-use stamp; a stamp is the step index."""

    name = "LRU"

    def __init__(self, size):
        self.size   = check_size(size)
        self.ws     = WorkingSet(size, initial_meta=0)
        self.faults = 0

    def access(self, page, step):
        slot = self.ws.find(page)
        fault = False
        if step < self.size:
            slot = step
        elif slot == NOT_FOUND:
            slot = self.ws.oldest()
            fault = True
            self.faults += 1
        self.ws.refresh(slot, page, step)
        return fault


# ─── 2. FIFO ──────────────────────────────────────────────────────────────────
class FIFOPolicy:
    """Slot order is arrival order; slot 0 is always the next victim. Hits change nothing."""

    name = "FIFO"

    def __init__(self, size):
        self.size   = check_size(size)
        self.ws     = WorkingSet(size)
        self.faults = 0

    def access(self, page, step):
        if step < self.size:
            self.ws.refresh(step, page)
            return False
        if self.ws.find(page) != NOT_FOUND:
            return False
        self.ws.evict_and_insert(0, page)
        self.faults += 1
        return True


# ─── 3. Clock (second chance) ─────────────────────────────────────────────────
class ClockPolicy:
    """
    FIFO order plus a use-bit per slot:
      - a hit sets the page's bit to 1
      - on a fault the hand sweeps from slot 0, clearing 1-bits, and
        evicts the first slot whose bit is already 0 (wrapping if needed)
      - the new page goes in the last slot with bit 0
    """

    name = "Clock"

    def __init__(self, size):
        self.size   = check_size(size)
        self.ws     = WorkingSet(size, initial_meta=0)
        self.faults = 0

    def _hand(self):
        bits = self.ws.meta
        while True:
            for i in range(self.size):
                if bits[i] == 0:
                    return i
                bits[i] -= 1

    def access(self, page, step):
        found = self.ws.find(page)
        fault = False
        if step < self.size:
            slot = step
        elif found != NOT_FOUND:
            slot = found
        else:
            self.ws.evict_and_insert(self._hand(), page, 0)
            slot = self.size - 1
            fault = True
            self.faults += 1
        # duplicates inside the warm-up fill count as found too
        self.ws.refresh(slot, page, 0 if found == NOT_FOUND else 1)
        return fault


def run_policy(policy_cls, trace, size):
    policy = policy_cls(size)
    for step, page in enumerate(trace):
        policy.access(page, step)
    return policy.faults


def lru_fault_count(trace, size):
    return run_policy(LRUPolicy, trace, size)


def fifo_fault_count(trace, size):
    return run_policy(FIFOPolicy, trace, size)


def clock_fault_count(trace, size):
    return run_policy(ClockPolicy, trace, size)
