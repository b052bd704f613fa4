"""
Logging Configuration
Sets up the global logger for the application and routes Qt's own
diagnostics (qWarning, qCritical, ...) into it.
"""
import logging
import sys
from typing import Optional

from PySide6.QtCore import QtMsgType, qInstallMessageHandler

_QT_LEVELS = {
    QtMsgType.QtDebugMsg: logging.DEBUG,
    QtMsgType.QtInfoMsg: logging.INFO,
    QtMsgType.QtWarningMsg: logging.WARNING,
    QtMsgType.QtCriticalMsg: logging.ERROR,
    QtMsgType.QtFatalMsg: logging.CRITICAL,
}

qt_logger = logging.getLogger("flareflux.qt")


def setup_logging(level: int = logging.INFO, log_file: Optional[str] = None) -> None:
    """
    Configures the root logger for the 'flareflux' namespace.

    Args:
        level: Logging level (e.g. logging.DEBUG, logging.INFO)
        log_file: Optional path to save logs to a file (see FLAREFLUX_LOG_FILE).
    """
    logger = logging.getLogger("flareflux")
    logger.setLevel(level)

    # Avoid duplicate handlers when the window is re-created
    if logger.hasHandlers():
        logger.handlers.clear()

    console_handler = logging.StreamHandler(sys.stdout)
    console_handler.setLevel(level)

    # Format: Time - Module - Level - Message
    formatter = logging.Formatter(
        '%(asctime)s - %(name)s - %(levelname)s - %(message)s',
        datefmt='%H:%M:%S'
    )
    console_handler.setFormatter(formatter)
    logger.addHandler(console_handler)

    if log_file:
        file_handler = logging.FileHandler(log_file, mode='w', encoding='utf-8')
        file_handler.setLevel(level)
        file_handler.setFormatter(formatter)
        logger.addHandler(file_handler)

    logger.info(
        f"Logging initialized (level={logging.getLevelName(level)}, "
        f"file={log_file or '-'})."
    )


def qt_message_handler(msg_type: QtMsgType, context, message: str) -> None:
    """Forward a Qt diagnostic message to the 'flareflux.qt' logger."""
    qt_logger.log(_QT_LEVELS.get(msg_type, logging.WARNING), message)


def install_qt_message_handler() -> None:
    qInstallMessageHandler(qt_message_handler)
