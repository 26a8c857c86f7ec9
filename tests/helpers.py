import hypothesis.strategies as st
from hypothesis import assume


@st.composite
def probabilities(draw, min_size=1, max_size=20):
    """Lists of probabilities summing to 1, with the odd zero thrown in."""
    weights = draw(st.lists(
        st.one_of(st.just(0.0), st.floats(0, 1)),
        min_size=min_size, max_size=max_size))
    total = sum(weights)
    assume(total > 0)
    return [w / total for w in weights]


@st.composite
def distributions(draw, min_size=1, max_size=20):
    ps = draw(probabilities(min_size=min_size, max_size=max_size))
    outcomes = draw(st.lists(
        st.integers(), min_size=len(ps), max_size=len(ps)))
    return outcomes, ps


def unit_floats():
    return st.floats(0, 1, exclude_max=True)
