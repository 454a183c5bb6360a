import logging

from kvik.logger import ColorFormatter, get_logger


def _record(level, name="Kvik/Node", msg="hello %s", args=("world",)):
    return logging.LogRecord(name, level, __file__, 1, msg, args, None)


def test_plain_format():
    fmt = ColorFormatter(colors=False)
    assert fmt.format(_record(logging.INFO)) == "[I] Kvik/Node: hello world"


def test_level_markers():
    fmt = ColorFormatter(colors=False)
    for level, letter in [
        (logging.DEBUG, "D"),
        (logging.INFO, "I"),
        (logging.WARNING, "W"),
        (logging.ERROR, "E"),
    ]:
        assert fmt.format(_record(level)).startswith(f"[{letter}] ")


def test_unknown_level_marker():
    fmt = ColorFormatter(colors=False)
    assert fmt.format(_record(5)).startswith("[?] ")


def test_colored_format_wraps_plain_text():
    plain = ColorFormatter(colors=False).format(_record(logging.WARNING))
    colored = ColorFormatter(colors=True).format(_record(logging.WARNING))
    assert colored.startswith("\033[0;33m")
    assert colored.endswith("\033[0m")
    assert plain in colored


def test_package_prefix_stripped_from_tag():
    fmt = ColorFormatter(colors=False)
    logger = get_logger("Kvik/LocalBroker")
    record = _record(logging.ERROR, name=logger.name, msg="boom", args=())
    assert fmt.format(record) == "[E] Kvik/LocalBroker: boom"


def test_get_logger_is_cached_and_defaults_to_info():
    first = get_logger("Kvik/Client")
    second = get_logger("Kvik/Client")
    assert first is second
    assert first.name.endswith("Kvik/Client")
    assert first.getEffectiveLevel() == logging.INFO
    assert not first.isEnabledFor(logging.DEBUG)


def test_root_handler_installed_once():
    get_logger("A")
    get_logger("B")
    root = get_logger("A").parent
    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, ColorFormatter)