import logging

import pytest

from jobconf import (
    BatchWriterConfig,
    ConfigurationParseError,
    Durability,
    JobConfiguration,
    can_create_tables,
    get_batch_writer_options,
    get_default_table_name,
    get_logger,
    get_simulation_mode,
    set_client_properties,
    set_create_tables,
    set_default_table_name,
    set_simulation_mode,
)
from jobconf.models import UNBOUNDED_MS


class OutputFormat:
    pass


class OtherOutputFormat:
    pass


# --- Default table name ---


def test_default_table_name_round_trip():
    conf = JobConfiguration()
    assert get_default_table_name(OutputFormat, conf) is None

    set_default_table_name(OutputFormat, conf, "mytable")
    assert get_default_table_name(OutputFormat, conf) == "mytable"


def test_default_table_name_overwrite():
    conf = JobConfiguration()
    set_default_table_name(OutputFormat, conf, "first")
    set_default_table_name(OutputFormat, conf, "second")
    assert get_default_table_name(OutputFormat, conf) == "second"


def test_default_table_name_none_is_a_noop():
    conf = JobConfiguration()
    set_default_table_name(OutputFormat, conf, None)
    assert len(conf) == 0

    set_default_table_name(OutputFormat, conf, "mytable")
    set_default_table_name(OutputFormat, conf, None)
    assert get_default_table_name(OutputFormat, conf) == "mytable"


def test_identities_do_not_clobber_each_other():
    conf = JobConfiguration()
    set_default_table_name(OutputFormat, conf, "table_a")
    set_default_table_name(OtherOutputFormat, conf, "table_b")

    assert get_default_table_name(OutputFormat, conf) == "table_a"
    assert get_default_table_name(OtherOutputFormat, conf) == "table_b"
    assert len(conf) == 2


# --- Feature flags ---


def test_flags_default_to_false():
    conf = JobConfiguration()
    assert can_create_tables(OutputFormat, conf) is False
    assert get_simulation_mode(OutputFormat, conf) is False
    # Reads do not write anything
    assert len(conf) == 0


def test_create_tables_flag():
    conf = JobConfiguration()
    set_create_tables(OutputFormat, conf, True)
    assert can_create_tables(OutputFormat, conf) is True
    assert get_simulation_mode(OutputFormat, conf) is False
    assert can_create_tables(OtherOutputFormat, conf) is False

    set_create_tables(OutputFormat, conf, False)
    assert can_create_tables(OutputFormat, conf) is False


def test_simulation_mode_flag():
    conf = JobConfiguration()
    set_simulation_mode(OutputFormat, conf, True)
    assert get_simulation_mode(OutputFormat, conf) is True
    assert can_create_tables(OutputFormat, conf) is False


# --- Batch writer settings ---


def test_batch_writer_options_defaults():
    conf = JobConfiguration()
    assert get_batch_writer_options(OutputFormat, conf, {}) == BatchWriterConfig()
    # No bundle given and none stored
    assert get_batch_writer_options(OutputFormat, conf) == BatchWriterConfig()


def test_batch_writer_options_single_property():
    conf = JobConfiguration()
    bw_config = get_batch_writer_options(
        OutputFormat, conf, {"batch.writer.max.write.threads": "7"}
    )
    defaults = BatchWriterConfig()

    assert bw_config.max_write_threads == 7
    assert bw_config.durability == defaults.durability
    assert bw_config.max_latency_ms == defaults.max_latency_ms
    assert bw_config.max_memory_bytes == defaults.max_memory_bytes
    assert bw_config.timeout_ms == defaults.timeout_ms


def test_batch_writer_options_all_properties():
    conf = JobConfiguration()
    bw_config = get_batch_writer_options(
        OutputFormat,
        conf,
        {
            "batch.writer.durability": "sync",
            "batch.writer.max.latency.sec": "30",
            "batch.writer.max.memory.bytes": "1048576",
            "batch.writer.max.timeout.sec": "0",
            "batch.writer.max.write.threads": "12",
        },
    )
    assert bw_config.durability == Durability.SYNC
    assert bw_config.max_latency_ms == 30_000
    assert bw_config.max_memory_bytes == 1_048_576
    assert bw_config.timeout_ms == UNBOUNDED_MS
    assert bw_config.max_write_threads == 12


def test_batch_writer_options_none_values_are_absent():
    conf = JobConfiguration()
    bw_config = get_batch_writer_options(
        OutputFormat, conf, {"batch.writer.durability": None}
    )
    assert bw_config == BatchWriterConfig()


def test_batch_writer_options_from_stored_properties():
    conf = JobConfiguration()
    set_client_properties(
        OutputFormat, conf, {"batch.writer.max.timeout.sec": "5", "unrelated": "x"}
    )
    assert get_batch_writer_options(OutputFormat, conf).timeout_ms == 5_000
    # Another consumer has its own bundle
    assert get_batch_writer_options(OtherOutputFormat, conf) == BatchWriterConfig()


def test_batch_writer_options_bogus_durability():
    conf = JobConfiguration()
    with pytest.raises(ConfigurationParseError, match="batch.writer.durability") as excinfo:
        get_batch_writer_options(OutputFormat, conf, {"batch.writer.durability": "bogus"})
    assert excinfo.value.key == "batch.writer.durability"
    assert excinfo.value.value == "bogus"


@pytest.mark.parametrize(
    "prop",
    [
        "batch.writer.max.latency.sec",
        "batch.writer.max.memory.bytes",
        "batch.writer.max.timeout.sec",
        "batch.writer.max.write.threads",
    ],
)
@pytest.mark.parametrize("raw", ["abc", "", "1.5", "10s", "1_000"])
def test_batch_writer_options_malformed_number(prop, raw):
    conf = JobConfiguration()
    with pytest.raises(ConfigurationParseError) as excinfo:
        get_batch_writer_options(OutputFormat, conf, {prop: raw})
    assert excinfo.value.key == prop
    assert isinstance(excinfo.value.__cause__, ValueError)


@pytest.mark.parametrize(
    "prop, raw",
    [
        ("batch.writer.max.latency.sec", "-1"),
        ("batch.writer.max.memory.bytes", "-1"),
        ("batch.writer.max.timeout.sec", "-5"),
        ("batch.writer.max.write.threads", "0"),
        ("batch.writer.max.write.threads", "2147483648"),
        ("batch.writer.max.write.threads", "99999999999999999999"),
        ("batch.writer.max.memory.bytes", "9223372036854775808"),
        ("batch.writer.max.memory.bytes", "99999999999999999999999"),
        ("batch.writer.max.latency.sec", "9223372036854775808"),
        ("batch.writer.max.timeout.sec", "99999999999999999999"),
    ],
)
def test_batch_writer_options_out_of_range(prop, raw):
    conf = JobConfiguration()
    with pytest.raises(ConfigurationParseError, match="Out of range") as excinfo:
        get_batch_writer_options(OutputFormat, conf, {prop: raw})
    assert excinfo.value.key == prop


def test_parse_error_is_logged(caplog, monkeypatch):
    # Earlier logging setup may have turned propagation off
    monkeypatch.setattr(get_logger(), "propagate", True)
    conf = JobConfiguration()
    with caplog.at_level(logging.ERROR, logger="jobconf"):
        with pytest.raises(ConfigurationParseError):
            get_batch_writer_options(
                OutputFormat, conf, {"batch.writer.max.write.threads": "many"}
            )
    assert "batch.writer.max.write.threads" in caplog.text


def test_batch_writer_options_largest_accepted_values():
    conf = JobConfiguration()
    bw_config = get_batch_writer_options(
        OutputFormat,
        conf,
        {
            "batch.writer.max.write.threads": "2147483647",
            "batch.writer.max.memory.bytes": "9223372036854775807",
        },
    )
    assert bw_config.max_write_threads == 2**31 - 1
    assert bw_config.max_memory_bytes == 2**63 - 1


@pytest.mark.parametrize("raw", [7, 1.5, b"7"])
def test_batch_writer_options_non_string_value(raw):
    conf = JobConfiguration()
    with pytest.raises(ConfigurationParseError, match="must be a string") as excinfo:
        get_batch_writer_options(
            OutputFormat, conf, {"batch.writer.max.write.threads": raw}
        )
    assert excinfo.value.key == "batch.writer.max.write.threads"
