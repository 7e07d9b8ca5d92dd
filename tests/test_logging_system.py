from four_fours.logging_system import LogLevel, configure_logging, get_logger


def test_verbosity_mapping():
    assert LogLevel.from_verbosity(0) == LogLevel.MINIMAL
    assert LogLevel.from_verbosity(1) == LogLevel.MODERATE
    assert LogLevel.from_verbosity(2) == LogLevel.DETAILED
    assert LogLevel.from_verbosity(3) == LogLevel.VERBOSE
    assert LogLevel.from_verbosity(9) == LogLevel.VERBOSE
    assert LogLevel.from_verbosity(-1) == LogLevel.SILENT


def test_levels_gate_messages():
    logger = configure_logging(LogLevel.MODERATE)
    assert logger.should_log(LogLevel.MINIMAL)
    assert logger.should_log(LogLevel.MODERATE)
    assert not logger.should_log(LogLevel.DETAILED)
    assert get_logger() is logger
    silent = configure_logging(LogLevel.SILENT)
    assert get_logger() is silent
    assert not silent.should_log(LogLevel.MINIMAL)


def test_log_to_file(tmp_path):
    path = tmp_path / "run.log"
    logger = configure_logging(LogLevel.SILENT, log_to_file=True, log_file_path=str(path))
    logger.critical("boom")  # silent level drops even critical messages
    configure_logging(LogLevel.MINIMAL, log_to_file=True, log_file_path=str(path))
    get_logger().info("game over")
    assert "game over" in path.read_text()
    configure_logging(LogLevel.SILENT)
