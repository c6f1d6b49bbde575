import logging
from blinker import Signal


class DatabaseEvents:
    """
    Container for blinker signals emitted when the text and subtitle databases change.

    Subscribe to events to keep editors or exporters in sync with the data model,
    e.g. to refresh a scene list when a new scene is imported.

    Signals:
        text_bank_added(sender, group, bank):
            Emitted after a text bank is added to a GameTextDatabase

        subtitle_bank_added(sender, bank):
            Emitted after a subtitle bank is added to a SubtitleDatabase

        scene_added(sender, scene):
            Emitted after a scene is added to a SubtitleBank

        scene_replaced(sender, scene):
            Emitted after an existing scene is replaced by a re-imported one

        error(sender, message):
            A source file could not be loaded

        warning(sender, message):
            Signals that a recoverable problem was found in the source data

        info(sender, message):
            A source file was loaded
    """
    text_bank_added: Signal
    subtitle_bank_added: Signal
    scene_added: Signal
    scene_replaced: Signal
    error: Signal
    warning: Signal
    info: Signal

    def __init__(self):
        self.text_bank_added = Signal("database-text-bank-added")
        self.subtitle_bank_added = Signal("database-subtitle-bank-added")
        self.scene_added = Signal("database-scene-added")
        self.scene_replaced = Signal("database-scene-replaced")

        self.error = Signal("database-error")
        self.warning = Signal("database-warning")
        self.info = Signal("database-info")

        # Adapt signal kwargs to logger positional args
        self._default_error_wrapper = lambda sender, message: logging.error(message)
        self._default_warning_wrapper = lambda sender, message: logging.warning(message)
        self._default_info_wrapper = lambda sender, message: logging.info(message)

    def connect_default_loggers(self):
        """
        Connect default logging handlers to logging signals.
        """
        self.error.connect(self._default_error_wrapper, weak=False)
        self.warning.connect(self._default_warning_wrapper, weak=False)
        self.info.connect(self._default_info_wrapper, weak=False)


def ReportError(events : DatabaseEvents|None, sender, message : str) -> None:
    """Send an error message through the events, or log it if there are none"""
    if events:
        events.error.send(sender, message=message)
    else:
        logging.error(message)

def ReportWarning(events : DatabaseEvents|None, sender, message : str) -> None:
    """Send a warning through the events, or log it if there are none"""
    if events:
        events.warning.send(sender, message=message)
    else:
        logging.warning(message)

def ReportInfo(events : DatabaseEvents|None, sender, message : str) -> None:
    """Send an informational message through the events, or log it if there are none"""
    if events:
        events.info.send(sender, message=message)
    else:
        logging.info(message)
