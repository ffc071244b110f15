"""
Alpha sweep: ESF permutations of 30 elements
Twenty parameters from alpha=2.0 down to alpha=0.1

Demonstrates:
- ``generate_esf_permutation`` — one permutation per call, printed as
  "(alpha, permutation)" pairs
- ``alpha_sweep`` + ``print_sweep_table`` — the same sweep as a table,
  with the expected cycle count beside each sample
- ``print_permutation_table`` — a single permutation in detail
- ``set_random_state`` — reproducible output for the whole script
"""

import numpy as np

from esf_permutations import (
    alpha_sweep,
    default_alpha_grid,
    expected_cycle_count,
    generate_esf_permutation,
    harmonic_number,
    print_permutation_table,
    print_sweep_table,
    sample_cycle_counts,
    set_random_state,
)

N = 30

# Seed the process-wide generator once; every call below draws from it.
set_random_state(2018)

# ============================================================================
# Plain pairs
# ============================================================================

for alpha in default_alpha_grid():
    print(f"the parameter is {alpha} and the perm is {generate_esf_permutation(N, alpha)}")

print()

# ============================================================================
# Tabulated sweep
# ============================================================================

sweep = alpha_sweep(N)
print_sweep_table(sweep, n=N)

print()

# ============================================================================
# One permutation in detail
# ============================================================================

print_permutation_table(generate_esf_permutation(N, 1.0))

# ============================================================================
# Mean cycle count at alpha=1 is the harmonic number H_n
# ============================================================================

counts = sample_cycle_counts(N, 1.0, size=100_000)
print(f"\nmean cycles over {len(counts)} samples: {np.mean(counts):.4f}")
print(f"H_{N}:                               {harmonic_number(N):.4f}")
assert np.isclose(np.mean(counts), expected_cycle_count(N, 1.0), atol=0.05)
