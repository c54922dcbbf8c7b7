"""
Tests for the trusted setup: SRS, ToxicWaste, setup().
"""
import copy
import hashlib
import pickle

import pytest

import kzg10.srs as srs_module
from kzg10.errors import SetupError
from kzg10.field import FR, G1, G2, ec_mul, ec_pairing, CURVE_ORDER
from kzg10.srs import SRS, ToxicWaste, setup


def _seed_tau(seed):
    h = hashlib.sha256(str(seed).encode()).digest()
    return int.from_bytes(h, "big") % CURVE_ORDER


class TestSRS:
    """SRS.generate / setup 테스트."""

    def test_g1_powers_length(self, srs_small):
        """g1_powers length == max_degree + 1."""
        assert len(srs_small.g1_powers) == 9

    def test_max_degree(self, srs_small):
        assert srs_small.max_degree == 8

    def test_generators(self, srs_small):
        assert srs_small.g1_powers[0] == G1
        assert srs_small.g1 == G1
        assert srs_small.g2 == G2

    def test_powers_match_seed_tau(self):
        """g1_powers[i] == tau^i * G1 and tau_g2 == tau * G2."""
        srs = SRS.generate(max_degree=3, seed=7)
        tau = FR(_seed_tau(7))
        for i, pt in enumerate(srs.g1_powers):
            assert pt == ec_mul(G1, tau ** i)
        assert srs.tau_g2 == ec_mul(G2, tau)

    def test_g1_and_g2_agree(self, srs_small):
        """e(tau*G1, G2) == e(G1, tau*G2)."""
        lhs = ec_pairing(srs_small.g2, srs_small.g1_powers[1])
        rhs = ec_pairing(srs_small.tau_g2, srs_small.g1)
        assert lhs == rhs

    def test_deterministic_with_same_seed(self):
        assert SRS.generate(max_degree=2, seed=99) == SRS.generate(max_degree=2, seed=99)

    def test_different_seeds_produce_different_srs(self):
        assert SRS.generate(max_degree=2, seed=1) != SRS.generate(max_degree=2, seed=2)

    def test_generate_without_seed(self):
        srs = setup(2)
        assert len(srs.g1_powers) == 3
        assert srs.tau_g2 is not None

    def test_random_setups_differ(self):
        assert setup(1).tau_g2 != setup(1).tau_g2

    def test_consecutive_powers_distinct(self, srs_small):
        for i in range(len(srs_small.g1_powers) - 1):
            assert srs_small.g1_powers[i] != srs_small.g1_powers[i + 1]

    def test_read_only(self, srs_small):
        assert isinstance(srs_small.g1_powers, tuple)
        with pytest.raises(AttributeError):
            srs_small.tau_g2 = G2
        with pytest.raises(AttributeError):
            srs_small.max_degree = 100

    def test_repr_has_no_points(self, srs_small):
        assert repr(srs_small) == "SRS(max_degree=8)"


class TestSetupErrors:
    @pytest.mark.parametrize("bad", [0, -1, 2.5, "3", None, True])
    def test_invalid_max_degree(self, bad):
        with pytest.raises(SetupError):
            setup(bad)

    def test_setup_error_is_value_error(self):
        with pytest.raises(ValueError):
            setup(0)

    def test_entropy_failure(self, monkeypatch):
        def broken(_):
            raise OSError("no entropy")
        monkeypatch.setattr(srs_module.secrets, "randbelow", broken)
        with pytest.raises(SetupError) as excinfo:
            setup(2)
        assert isinstance(excinfo.value.__cause__, OSError)


class TestSRSConstruction:
    def test_rebuild_from_points(self, srs_small):
        rebuilt = SRS(list(srs_small.g1_powers), srs_small.tau_g2)
        assert rebuilt == srs_small

    def test_rejects_wrong_generator(self, srs_small):
        with pytest.raises(ValueError):
            SRS(srs_small.g1_powers[1:], srs_small.tau_g2)

    def test_rejects_off_curve_point(self, srs_small):
        bad = list(srs_small.g1_powers)
        bad[2] = (bad[2][0], bad[2][1] + 1)
        with pytest.raises(ValueError):
            SRS(bad, srs_small.tau_g2)

    def test_rejects_g1_as_tau_g2(self, srs_small):
        with pytest.raises(ValueError):
            SRS(srs_small.g1_powers, srs_small.g1_powers[1])

    def test_rejects_empty(self):
        with pytest.raises(ValueError):
            SRS([], G2)

    def test_consistency_of_generated_srs(self, srs_small):
        srs_small.check_consistency()

    def test_consistency_rejects_swapped_power(self, srs_small):
        bad = list(srs_small.g1_powers)
        bad[2] = ec_mul(G1, 5)
        srs = SRS(bad, srs_small.tau_g2)
        with pytest.raises(ValueError):
            srs.check_consistency()

    def test_consistency_rejects_last_power(self, srs_small):
        bad = list(srs_small.g1_powers)
        bad[-1] = ec_mul(bad[-1], 2)
        with pytest.raises(ValueError):
            SRS(bad, srs_small.tau_g2).check_consistency()


class TestToxicWaste:
    """τ의 수명 관리 테스트."""

    def test_destroyed_after_block(self):
        with ToxicWaste(5) as tau:
            assert tau.value == FR(5)
        assert tau.destroyed
        with pytest.raises(RuntimeError):
            tau.value

    def test_destroyed_on_exception(self):
        waste = ToxicWaste(5)
        with pytest.raises(KeyError):
            with waste:
                raise KeyError("boom")
        assert waste.destroyed

    def test_repr_hides_value(self):
        value = 1234567891011
        waste = ToxicWaste(value)
        assert str(value) not in repr(waste)
        assert repr(waste) == "ToxicWaste(<live>)"

    def test_cannot_pickle_or_copy(self):
        waste = ToxicWaste(5)
        with pytest.raises(TypeError):
            pickle.dumps(waste)
        with pytest.raises(TypeError):
            copy.copy(waste)
        with pytest.raises(TypeError):
            copy.deepcopy(waste)

    def test_zero_rejected(self):
        with pytest.raises(SetupError):
            ToxicWaste(CURVE_ORDER)

    def test_sample_in_range(self):
        with ToxicWaste.sample() as tau:
            assert 1 <= int(tau.value) < CURVE_ORDER

    def test_setup_destroys_tau(self, monkeypatch):
        created = []
        original = ToxicWaste.from_seed

        def recording(cls, seed):
            waste = original(seed)
            created.append(waste)
            return waste

        monkeypatch.setattr(ToxicWaste, "from_seed", classmethod(recording))
        setup(2, seed=5)
        assert len(created) == 1
        assert created[0].destroyed

    def test_setup_destroys_tau_on_error(self, monkeypatch):
        created = []
        original = ToxicWaste.from_seed

        def recording(cls, seed):
            waste = original(seed)
            created.append(waste)
            return waste

        def failing_mul(point, scalar):
            raise RuntimeError("group failure")

        monkeypatch.setattr(ToxicWaste, "from_seed", classmethod(recording))
        monkeypatch.setattr(srs_module, "ec_mul", failing_mul)
        with pytest.raises(RuntimeError):
            setup(2, seed=5)
        assert created[0].destroyed

    def test_srs_holds_no_scalar(self):
        """No attribute of a published SRS is a field element."""
        srs = SRS.generate(max_degree=2, seed=11)
        for name in dir(srs):
            if name.startswith("__"):
                continue
            assert not isinstance(getattr(srs, name), FR), name
