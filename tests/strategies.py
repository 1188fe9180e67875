"""Hypothesis strategies for caseswitch property tests."""

from hypothesis import strategies as st

# Predicate results for a branch list; truthy/falsy values beyond bool
# exercise the truth-testing of predicate results.
predicate_results = st.lists(
    st.one_of(st.booleans(), st.sampled_from([0, 1, "", "x", None, [], [0]])),
    max_size=12,
)

switch_values = st.one_of(
    st.integers(),
    st.text(max_size=30),
    st.none(),
    st.tuples(st.integers(), st.text(max_size=5)),
)
