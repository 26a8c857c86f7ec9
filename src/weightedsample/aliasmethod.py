import logging

from weightedsample.sampler import WeightedSampler

logger = logging.getLogger(__name__)


class AliasSampler(WeightedSampler):
    """Samples values from a weighted distribution using Vose's algorithm for
    the Alias Method.

    See http://www.keithschwarz.com/darts-dice-coins/ for details.

    The table is built from the share of [0, 1) that each slot would own
    under the linear scan of WeightedSampler, so long run frequencies,
    zero probability slots and the fallback slot all behave the same way.
    Only the mapping from an individual uniform value to an outcome
    differs.
    """

    def _prepare(self):
        masses = self.distribution.effective_masses()

        n = len(masses)

        self._alias = [None] * n
        self._probabilities = [None] * n

        small = []
        large = []

        ps = [m * n for m in masses]

        for i, p in enumerate(ps):
            if p < 1:
                small.append(i)
            else:
                large.append(i)

        while small and large:
            l = small.pop()
            g = large.pop()
            assert masses[g] > 0
            self._probabilities[l] = ps[l]
            self._alias[l] = g
            ps[g] = (ps[l] + ps[g]) - 1
            if ps[g] < 1:
                small.append(g)
            else:
                large.append(g)
        heaviest = max(range(n), key=masses.__getitem__)
        for q in [small, large]:
            while q:
                g = q.pop()
                if masses[g] > 0:
                    self._probabilities[g] = 1.0
                    self._alias[g] = g
                else:
                    # Only reachable through rounding in the loop above.
                    self._probabilities[g] = 0.0
                    self._alias[g] = heaviest

        assert None not in self._alias
        assert None not in self._probabilities

        logger.debug("Built alias table of %d columns", n)

    def _select(self, u):
        n = len(self._probabilities)
        scaled = u * n
        i = min(int(scaled), n - 1)
        p = self._probabilities[i]

        if p >= 1:
            toss = True
        elif p <= 0:
            toss = False
        else:
            toss = scaled - i < p

        if toss:
            return i
        else:
            return self._alias[i]

    def columns(self):
        """Returns (column, probability, alias) for each column of the table.

        A column is the outcome itself with its probability and the alias
        otherwise."""
        return list(zip(
            range(len(self._probabilities)),
            self._probabilities, self._alias))
