from inputforge.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.randomness.mode == "system"
    assert cfg.randomness.seed.secret_env == "INPUTFORGE_SEED_SECRET"
    assert cfg.randomness.seed.secret is None
    assert cfg.corpus.path is None
    assert (cfg.corpus.min_length, cfg.corpus.max_length) == (3, 40)
    assert cfg.words.default == "ag"
    assert cfg.words.ag_path is None
    assert cfg.logging.level == "WARNING"
