import logging

from weightedsample.distribution import Distribution, DEFAULT_PRECISION

logger = logging.getLogger(__name__)


class WeightedSampler(object):
    """Draws outcomes from a fixed discrete distribution.

    Each draw takes one value r from ``source`` and walks the slots in
    order, subtracting each probability from r until it reaches zero. The
    slot where that happens is the one chosen. Slots with zero probability
    are skipped. If r is never used up, which only happens when the
    probabilities add up to slightly less than 1, the last slot is chosen.

    Draw with ``sample()``, or treat the sampler as an endless stream of
    draws: ``next(iter(sampler))`` or ``itertools.islice(sampler, n)``.

    Samplers hold no mutable state, so drawing from several threads is as
    safe as the source is.
    """

    def __init__(
        self, source, outcomes, probabilities, precision=DEFAULT_PRECISION
    ):
        self._init(source, Distribution(outcomes, probabilities, precision))

    @classmethod
    def from_distribution(cls, source, distribution):
        assert isinstance(distribution, Distribution)
        result = cls.__new__(cls)
        result._init(source, distribution)
        return result

    def _init(self, source, distribution):
        self.source = source
        self.distribution = distribution
        self._fallback = distribution.fallback_index()
        self._prepare()
        logger.debug(
            "Built %s over %d outcomes (total probability %r)",
            type(self).__name__, len(distribution), distribution.total)

    def _prepare(self):
        pass

    @property
    def outcomes(self):
        return self.distribution.outcomes

    @property
    def probabilities(self):
        return self.distribution.probabilities

    def sample(self):
        return self.distribution.outcomes[self._select(self.source())]

    def _select(self, r):
        for i, p in enumerate(self.distribution.probabilities):
            if p == 0:
                continue
            r -= p
            if r <= 0.0:
                return i
        return self._fallback

    def __iter__(self):
        while True:
            yield self.sample()

    def __repr__(self):
        return '%s(%r, %r)' % (
            type(self).__name__, self.source, self.distribution)
