def test_collect_samples():
    from reports import collect_samples
    from textbook_rsa.config import RsaConfig

    samples = collect_samples((16, 32), trials=3, config=RsaConfig(error_bound=2.0 ** -20))
    assert [s.bit_length for s in samples] == [16, 32]
    assert all(s.mean_attempts >= 1 for s in samples)


def test_dashboard_written(tmp_path):
    from reports import collect_samples, make_prime_search_dashboard
    from utils.plotting import HAS_MPL

    samples = collect_samples((16, 32), trials=2, seed=5)
    outcome = make_prime_search_dashboard(tmp_path / "out" / "prime_search.png", samples)
    assert len(outcome["samples"]) == 2
    if HAS_MPL:
        assert outcome["path"].exists()
    else:
        assert outcome["path"] is None
