from mutilate.config import load_config


def test_default_values() -> None:
    cfg = load_config(env={})
    assert cfg.schema_version == 1
    assert cfg.language == "en"
    assert cfg.aggressive is False
    assert cfg.wordlist.path is None
    assert cfg.wordlist.encoding == "utf-8"
    assert cfg.wordlist.min_bucket_size == 16
    assert cfg.wordlist.max_syllable_length == 255
    assert cfg.seed.value is None
    assert cfg.seed.secret_env == "MUTILATE_SEED_SECRET"
    assert cfg.seed.secret is None
    assert cfg.verification.strict is False
