from decimal import Decimal

from mirr.config import Settings


class TestSettings:
    def test_defaults(self):
        s = Settings()
        assert s.estimate_tolerance == Decimal("0.000000001")
        assert s.result_tolerance == Decimal("0.000000001")
        assert s.root_max_iterations == 100
        assert s.search_max_iterations == 100
        assert s.initial_low_estimate == Decimal("-0.99999")
        assert s.initial_high_estimate == Decimal("1.0")

    def test_environment_override(self, monkeypatch):
        monkeypatch.setenv("MIRR_ROOT_MAX_ITERATIONS", "50")
        monkeypatch.setenv("MIRR_INITIAL_HIGH_ESTIMATE", "2.5")
        s = Settings()
        assert s.root_max_iterations == 50
        assert s.initial_high_estimate == Decimal("2.5")
