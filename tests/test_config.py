# tests/test_config.py
from pathlib import Path

import pytest

from tweet_stats.config import (
    DEFAULT_ENCODING_ERRORS,
    MAX_DISTINCT,
    FrequencyConfig,
    MedianConfig,
    RunConfig,
)
from tweet_stats.errors import (
    DomainError,
    PartitionAlignmentError,
    ResourceExhaustionError,
    TweetStatsError,
)


def test_median_config_default_domain_covers_max_distinct():
    assert MedianConfig().domain_size == MAX_DISTINCT + 1


@pytest.mark.parametrize(
    "kwargs",
    [
        dict(num_workers=0),
        dict(chunk_bytes=0),
        dict(max_token_bytes=0),
        dict(token_width=-1),
    ],
)
def test_frequency_config_validation(kwargs):
    with pytest.raises(ValueError):
        FrequencyConfig(**kwargs)


def test_median_config_validation():
    with pytest.raises(ValueError):
        MedianConfig(domain_size=0)


def test_configs_are_frozen():
    cfg = FrequencyConfig()
    with pytest.raises(AttributeError):
        cfg.num_workers = 9  # type: ignore[misc]


def test_run_config_paths(tmp_path):
    cfg = RunConfig(run_dir=tmp_path)
    assert cfg.input_path == tmp_path / "tweet_input" / "tweets.txt"
    assert cfg.words_output_path == tmp_path / "tweet_output" / "ft1.txt"
    assert cfg.median_output_path == tmp_path / "tweet_output" / "ft2.txt"
    assert cfg.resolved_log_dir == tmp_path / "logs"
    assert cfg.resolved_log_dir != cfg.median_output_path.parent
    assert RunConfig(run_dir=tmp_path, log_dir="logs").resolved_log_dir == Path("logs")


def test_frequency_config_escapes_invalid_utf8_by_default():
    assert DEFAULT_ENCODING_ERRORS == "surrogateescape"
    assert FrequencyConfig().encoding_errors == "surrogateescape"


def test_run_config_log_rotation_settings(tmp_path):
    cfg = RunConfig(run_dir=tmp_path)
    assert not cfg.rotate_logs
    assert cfg.log_max_bytes == 10 * 1024 * 1024
    assert cfg.log_backup_count == 3
    with pytest.raises(ValueError):
        RunConfig(run_dir=tmp_path, log_max_bytes=0)
    with pytest.raises(ValueError):
        RunConfig(run_dir=tmp_path, log_backup_count=-1)


def test_error_hierarchy_and_messages():
    err = DomainError(80, 71, record_index=4)
    assert isinstance(err, TweetStatsError) and isinstance(err, ValueError)
    assert str(err) == "Distinct-word count 80 at record 4 is outside the domain [0, 71)"
    assert str(DomainError(-1, 71)) == "Distinct-word count -1 is outside the domain [0, 71)"

    align = PartitionAlignmentError("cannot align", offset=1234)
    assert align.offset == 1234
    assert str(align) == "cannot align (offset 1,234)"

    res = ResourceExhaustionError(2_000_000_000)
    assert isinstance(res, TweetStatsError)
    assert "2,000,000,000" in str(res)
