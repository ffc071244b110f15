"""Tests for the random-source configuration system."""

import os

import numpy as np
import pytest

import esf_permutations._config as _cfg
from esf_permutations import generate_esf_permutation
from esf_permutations._config import (
    get_default_rng,
    get_random_state,
    resolve_rng,
    set_random_state,
)


def _reset():
    _cfg._seed_override = None
    _cfg._default_rng = None
    os.environ.pop("ESF_PERMUTATIONS_SEED", None)


class TestGetRandomState:
    """Tests for get_random_state() resolution order."""

    def setup_method(self):
        """Reset state before each test."""
        _reset()

    def teardown_method(self):
        """Reset state after each test."""
        _reset()

    def test_defaults_to_entropy(self):
        assert get_random_state() is None

    def test_env_var(self):
        os.environ["ESF_PERMUTATIONS_SEED"] = "123"
        assert get_random_state() == 123

    def test_env_var_whitespace(self):
        os.environ["ESF_PERMUTATIONS_SEED"] = "  7 "
        assert get_random_state() == 7

    def test_programmatic_override_wins_over_env(self):
        os.environ["ESF_PERMUTATIONS_SEED"] = "123"
        set_random_state(5)
        assert get_random_state() == 5

    def test_none_restores_default(self):
        set_random_state(5)
        set_random_state(None)
        assert get_random_state() is None

    @pytest.mark.parametrize("value", ["abc", "-3", "1.5"])
    def test_invalid_env_var_warns(self, value):
        os.environ["ESF_PERMUTATIONS_SEED"] = value
        with pytest.warns(UserWarning, match="ESF_PERMUTATIONS_SEED"):
            assert get_random_state() is None


class TestSetRandomState:
    """Tests for set_random_state() validation."""

    def setup_method(self):
        _reset()

    def teardown_method(self):
        _reset()

    def test_rejects_non_integer(self):
        with pytest.raises(TypeError):
            set_random_state("42")

    def test_rejects_bool(self):
        with pytest.raises(TypeError):
            set_random_state(True)

    def test_rejects_negative(self):
        with pytest.raises(ValueError):
            set_random_state(-1)

    def test_accepts_numpy_integer(self):
        set_random_state(np.int64(9))
        assert get_random_state() == 9


class TestDefaultRng:
    """Tests for the process-wide generator."""

    def setup_method(self):
        _reset()

    def teardown_method(self):
        _reset()

    def test_created_once(self):
        assert get_default_rng() is get_default_rng()

    def test_seeded_generator_is_reproducible(self):
        set_random_state(2018)
        a = generate_esf_permutation(20, 1.0)
        set_random_state(2018)
        b = generate_esf_permutation(20, 1.0)
        assert a == b

    def test_seeded_calls_advance(self):
        set_random_state(2018)
        a = generate_esf_permutation(20, 1.0)
        b = generate_esf_permutation(20, 1.0)
        assert a.labels != b.labels

    def test_set_random_state_discards_generator(self):
        first = get_default_rng()
        set_random_state(1)
        assert get_default_rng() is not first

    def test_env_seed_used(self):
        os.environ["ESF_PERMUTATIONS_SEED"] = "11"
        a = generate_esf_permutation(15, 0.5)
        _cfg._default_rng = None
        b = generate_esf_permutation(15, 0.5)
        assert a == b


class TestResolveRng:
    """Tests for resolve_rng()."""

    def setup_method(self):
        _reset()

    def teardown_method(self):
        _reset()

    def test_none_is_default(self):
        assert resolve_rng(None) is get_default_rng()

    def test_int_seed(self):
        rng = resolve_rng(3)
        assert isinstance(rng, np.random.Generator)
        assert rng.random() == np.random.default_rng(3).random()

    def test_generator_passthrough(self):
        rng = np.random.default_rng(0)
        assert resolve_rng(rng) is rng

    def test_duck_typed_source_passthrough(self):
        class Source:
            def random(self):
                return 0.5

            def integers(self, high):
                return 0

        source = Source()
        assert resolve_rng(source) is source

    @pytest.mark.parametrize("bad", [True, "seed", 1.5, object()])
    def test_rejects_other_types(self, bad):
        with pytest.raises(TypeError):
            resolve_rng(bad)
