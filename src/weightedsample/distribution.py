"""Validated discrete probability distributions.

A distribution is a pair of parallel sequences, outcomes and their
probabilities, checked once at construction and immutable afterwards."""

from pyrsistent import pvector

DEFAULT_PRECISION = 0.0001


class DistributionError(ValueError):
    pass


class EmptyDistribution(DistributionError):
    pass


class LengthMismatch(DistributionError):
    def __init__(self, outcomes, probabilities):
        DistributionError.__init__(
            self,
            "Need matching lengths for outcomes and probabilities, got "
            "%d outcomes and %d probabilities" % (outcomes, probabilities))
        self.outcomes = outcomes
        self.probabilities = probabilities


class ProbabilityOutOfRange(DistributionError):
    def __init__(self, probability, index):
        DistributionError.__init__(
            self, "Probability outside of range [0, 1]: %r (at index %d)" % (
                probability, index))
        self.probability = probability
        self.index = index


class ProbabilitySumMismatch(DistributionError):
    def __init__(self, total, precision):
        DistributionError.__init__(
            self,
            "Probabilities add up to %r, need to be 1 to within precision "
            "of %r" % (total, precision))
        self.total = total
        self.precision = precision


class Distribution(object):
    """An ordered sequence of (outcome, probability) slots.

    Checks are performed in a fixed order: emptiness, then matching
    lengths, then the range of each probability, then the total. Inputs
    that fail several checks always report the first of these.

    Duplicate outcomes are kept as separate slots.
    """

    def __init__(self, outcomes, probabilities, precision=DEFAULT_PRECISION):
        outcomes = pvector(outcomes)
        probabilities = pvector(probabilities)

        if not outcomes or not probabilities:
            raise EmptyDistribution("Need at least one outcome/probability")
        if len(outcomes) != len(probabilities):
            raise LengthMismatch(len(outcomes), len(probabilities))

        total = 0.0
        for i, p in enumerate(probabilities):
            # Written this way round so that NaN fails too.
            if not (0.0 <= p <= 1.0):
                raise ProbabilityOutOfRange(p, i)
            total += p

        if abs(1.0 - total) > precision:
            raise ProbabilitySumMismatch(total, precision)

        self.outcomes = outcomes
        self.probabilities = probabilities
        self.precision = precision
        self.total = total

    @classmethod
    def from_pairs(cls, pairs, precision=DEFAULT_PRECISION):
        pairs = list(pairs)
        return cls(
            [o for o, _ in pairs], [p for _, p in pairs], precision)

    @classmethod
    def from_mapping(cls, mapping, precision=DEFAULT_PRECISION):
        return cls.from_pairs(mapping.items(), precision)

    def fallback_index(self):
        """The slot chosen when a draw runs off the end of the cumulative
        distribution: always the last slot, whatever its probability."""
        return len(self.probabilities) - 1

    def effective_masses(self):
        """Returns the share of [0, 1) that each slot owns under a linear
        scan of the cumulative distribution.

        Mass past 1.0 is cut from the tail, and any shortfall below 1.0
        goes to the fallback slot, so the result always sums to 1.
        """
        masses = []
        covered = 0.0
        for p in self.probabilities:
            upper = min(covered + p, 1.0)
            masses.append(max(upper - covered, 0.0))
            covered = upper
        if covered < 1.0:
            masses[self.fallback_index()] += 1.0 - covered
        return masses

    def __len__(self):
        return len(self.outcomes)

    def __iter__(self):
        return iter(zip(self.outcomes, self.probabilities))

    def __eq__(self, other):
        if not isinstance(other, Distribution):
            return NotImplemented
        return (
            self.outcomes == other.outcomes and
            self.probabilities == other.probabilities
        )

    def __hash__(self):
        return hash((self.outcomes, self.probabilities))

    def __repr__(self):
        return 'Distribution(%r)' % (list(self),)
