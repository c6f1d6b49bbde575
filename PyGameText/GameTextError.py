from __future__ import annotations


class GameTextError(Exception):
    """
    Base class for errors raised by the text and subtitle databases
    """
    def __init__(self, message : str|None = None, error : Exception|None = None):
        super().__init__(message)
        self.message : str|None = message
        self.error : Exception|None = error

    def __str__(self) -> str:
        if self.error:
            return f"{self.message} ({str(self.error)})" if self.message else str(self.error)
        return self.message or self.__class__.__name__

class DuplicateKeyError(GameTextError):
    """Raised when inserting a bank, scene or group entry whose key already exists"""
    def __init__(self, message : str, key : object = None):
        super().__init__(message)
        self.key = key

class NotFoundError(GameTextError, KeyError):
    """Raised when a required lookup targets a missing key"""
    def __init__(self, message : str, key : object = None):
        GameTextError.__init__(self, message)
        self.key = key

    def __str__(self) -> str:
        return GameTextError.__str__(self)

class GameTextParseError(GameTextError):
    """Raised when a JSON document or asset file cannot be turned into the data model"""
    pass
