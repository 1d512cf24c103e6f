"""Hypothesis strategies for property-based testing of klaw-schema."""

from hypothesis import strategies as st
from klaw_schema.json import I64_MAX, I64_MIN, U64_MAX

# -----------------------------------------------------------------------------
# Numbers in the 64-bit model
# -----------------------------------------------------------------------------

signed = st.integers(min_value=I64_MIN, max_value=I64_MAX)
unsigned = st.integers(min_value=0, max_value=U64_MAX)
above_signed = st.integers(min_value=I64_MAX + 1, max_value=U64_MAX)
finite_floats = st.floats(allow_nan=False, allow_infinity=False)
fractional_floats = finite_floats.filter(lambda f: not f.is_integer())

# -----------------------------------------------------------------------------
# JSON values
# -----------------------------------------------------------------------------

keys = st.text(alphabet=st.sampled_from('abcdefghijklmnopqrstuvwxyz_'), min_size=1, max_size=8)
scalars = st.none() | st.booleans() | signed | finite_floats | st.text(max_size=20)

json_values = st.recursive(
    scalars,
    lambda children: st.lists(children, max_size=5) | st.dictionaries(keys, children, max_size=5),
    max_leaves=20,
)
