import os

from typing import Any

import regex
from PyGameText.GameTextError import GameTextParseError

default_encoding = os.getenv('DEFAULT_ENCODING', 'utf-8')

def GetValueName(value : Any) -> str:
    """
    Get the name of an object if it has one, or a string representation of the object.
    Then, if the name is in CamelCase, insert spaces between each word.
    """
    if hasattr(value, 'name'):
        name = value.name
        # Insert spaces before all caps in CamelCase (but not at the start)
        spaced_name = regex.sub(r'(?<=[a-z])(?=[A-Z])', ' ', name)
        return spaced_name

    return str(value)

def ParseHexId(value : str|int) -> int:
    """
    Parse a line or hint id written as hex, with or without a 0x prefix.
    """
    if isinstance(value, bool):
        raise GameTextParseError(f"Invalid hex id: {value!r}")

    if isinstance(value, int):
        return value

    text = str(value).strip()
    if not regex.fullmatch(r'(?i)(0x)?[0-9a-f]+', text):
        raise GameTextParseError(f"Invalid hex id: {value!r}")

    return int(text, 16)

def FormatHexId(value : int, width : int = 4) -> str:
    """
    Format an id as lowercase hex, zero padded to at least `width` digits
    """
    if value < 0:
        raise ValueError(f"Cannot format negative id {value} as hex")
    return f"{value:0{width}x}"

def GetInputPath(filepath : str|None) -> str|None:
    """
    Normalize the input file path for cross-platform compatibility.

    Args:
        filepath: Input file path

    Returns:
        str: Normalized path
        None: If filepath is None
    """
    if not filepath:
        return None
    return os.path.normpath(filepath)
