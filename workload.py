# workload.py

import math
import numpy as np

TRACE_LENGTH = 1000
FIELD_SIZE   = 100
TRACE_MU     = 10.0
TRACE_SIGMA  = 2.0


class NormalVariateGenerator:
    """
    Polar (Marsaglia) sampler for N(mu, sigma^2).

    Each accepted draw yields two standard normals. The first is returned
    and the second is held for the next call, so two calls consume exactly
    one accepted pair of uniforms.
    """

    def __init__(self, rng=None, seed=None):
        self.rng   = rng if rng is not None else np.random.default_rng(seed)
        self.spare = None

    def _uniform(self):
        return self.rng.uniform(-1.0, 1.0)

    def generate(self, mu=0.0, sigma=1.0):
        if sigma < 0:
            raise ValueError(f"sigma must be non-negative, got {sigma}")

        if self.spare is not None:
            x2, self.spare = self.spare, None
            return mu + sigma * x2

        while True:
            u1 = self._uniform()
            u2 = self._uniform()
            w = u1 * u1 + u2 * u2
            if 0 < w < 1:
                break

        mult = math.sqrt(-2.0 * math.log(w) / w)
        self.spare = u2 * mult
        return mu + sigma * u1 * mult


class ReferenceTraceGenerator:
    """
    Builds a page-reference trace split into fields of `field_size`
    references. Field f clusters around 10*f + mu; the field offset is
    added to the real variate before truncating toward zero.
    """

    def __init__(self, generator=None, length=TRACE_LENGTH, field_size=FIELD_SIZE,
                 mu=TRACE_MU, sigma=TRACE_SIGMA):
        self.generator  = generator if generator is not None else NormalVariateGenerator()
        self.length     = length
        self.field_size = field_size
        self.mu         = mu
        self.sigma      = sigma

    def generate_trace(self):
        trace = np.empty(self.length, dtype=np.int64)
        for i in range(self.length):
            x = self.generator.generate(self.mu, self.sigma)
            trace[i] = int(10 * (i // self.field_size) + x)
        trace.flags.writeable = False
        return trace

    next_trace = generate_trace


def generate_trace(generator=None):
    return ReferenceTraceGenerator(generator).generate_trace()
