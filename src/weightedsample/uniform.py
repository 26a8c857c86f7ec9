"""Sources of uniform floats in [0, 1).

A source is any zero-argument callable returning such a float, so the
bound method ``Random(seed).random`` will do as well as the classes here.
"""

from itertools import cycle
from random import Random


class StandardUniformSource(object):
    """Draws from a single ``random.Random`` owned by this source.

    With no seed the generator is seeded from system entropy. Calls are
    safe from several threads under CPython, although those threads then
    share one stream of values.
    """

    def __init__(self, seed=None):
        self.seed = seed
        self.__random = Random(seed)

    def __call__(self):
        return self.__random.random()

    def __repr__(self):
        return 'StandardUniformSource(seed=%r)' % (self.seed,)


class ScriptedUniformSource(object):
    """Repeats a fixed sequence of values forever. Not thread safe."""

    def __init__(self, values):
        values = tuple(values)
        if not values:
            raise ValueError("Need at least one value to repeat")
        for v in values:
            if not (0.0 <= v < 1.0):
                raise ValueError("Value %r outside of range [0, 1)" % (v,))
        self.values = values
        self.__values = cycle(values)

    def __call__(self):
        return next(self.__values)

    def __repr__(self):
        return 'ScriptedUniformSource(%r)' % (list(self.values),)
