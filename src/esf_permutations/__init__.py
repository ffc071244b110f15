"""esf_permutations — Random permutations with Ewens-distributed cycles.

Samples permutations of ``1..n`` from the Ewens Sampling Formula
ESF(n, α) via the Feller Coupling: a sequence of Bernoulli trials
fixes the cycle lengths, a Fisher–Yates shuffle fixes the labels, and
the two are combined into disjoint-cycle notation.

Public API:
    .. autosummary::
        generate_esf_permutation
        generate_esf_permutations
        alpha_sweep
        default_alpha_grid
        sample_cycle_lengths
        uniform_permutation
        format_cycle_notation
        parse_cycle_notation
        split_cycles
        cycles_to_one_line
        harmonic_number
        expected_cycle_count
        cycle_count_variance
        cycle_count_distribution
        sample_cycle_counts
        cycle_type
        esf_probability
        print_permutation_table
        print_sweep_table
        get_random_state
        set_random_state
        get_default_rng
        ESFPermutation
        RandomSource
        InvalidSizeError
        InvalidParameterError
        PreconditionViolationError
"""

from ._config import get_default_rng, get_random_state, set_random_state
from ._errors import (
    InvalidParameterError,
    InvalidSizeError,
    PreconditionViolationError,
)
from ._results import ESFPermutation
from ._typing import RandomSource
from .core import (
    alpha_sweep,
    default_alpha_grid,
    generate_esf_permutation,
    generate_esf_permutations,
)
from .cycles import sample_cycle_lengths
from .diagnostics import (
    cycle_count_distribution,
    cycle_count_variance,
    cycle_type,
    esf_probability,
    expected_cycle_count,
    harmonic_number,
    sample_cycle_counts,
)
from .display import print_permutation_table, print_sweep_table
from .notation import (
    cycles_to_one_line,
    format_cycle_notation,
    parse_cycle_notation,
    split_cycles,
)
from .permutations import uniform_permutation

__all__ = [
    "ESFPermutation",
    "RandomSource",
    "InvalidSizeError",
    "InvalidParameterError",
    "PreconditionViolationError",
    "generate_esf_permutation",
    "generate_esf_permutations",
    "alpha_sweep",
    "default_alpha_grid",
    "sample_cycle_lengths",
    "uniform_permutation",
    "format_cycle_notation",
    "parse_cycle_notation",
    "split_cycles",
    "cycles_to_one_line",
    "harmonic_number",
    "expected_cycle_count",
    "cycle_count_variance",
    "cycle_count_distribution",
    "sample_cycle_counts",
    "cycle_type",
    "esf_probability",
    "print_permutation_table",
    "print_sweep_table",
    "get_random_state",
    "set_random_state",
    "get_default_rng",
]

__version__ = "0.1.0"
