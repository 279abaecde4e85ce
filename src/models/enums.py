"""
Enums for scene description model
"""

from enum import Enum, auto


class ShapeKind(Enum):
    """Figure geometry variants (first token of a figure line)"""
    RECTANGLE = "rectangle"
    CIRCLE = "circle"


class TransformKind(Enum):
    """Animation transform variants (first token of an animation line)"""
    MOVE = "move"
    ROTATE = "rotate"
    SCALE = "scale"


class SceneErrorKind(Enum):
    """
    Fatal scene load failures

    Anything listed here aborts the whole load - no partial Scene is produced.
    Recoverable fields (unknown color, unparsable number) never end up here.
    """
    UNKNOWN_FIGURE = auto()      # Figure line kind is not rectangle/circle
    UNKNOWN_ANIMATION = auto()   # Animation line kind is not move/rotate/scale
    MISSING_TOKEN = auto()       # Fewer parameters than the kind requires
    EMPTY_LINE = auto()          # Record line with no tokens at all
    MALFORMED_HEADER = auto()    # Size / layer count / animation count not an integer
    TRUNCATED = auto()           # Fewer lines than the declared counts need
    MISSING_RESOURCE = auto()    # Named scene block does not exist
    UNREADABLE_RESOURCE = auto() # Scene block exists but cannot be read or decoded


class LogLevel(Enum):
    """Log severity levels"""
    DEBUG = auto()
    INFO = auto()
    WARN = auto()
    ERROR = auto()


class LogCategory(Enum):
    """Log categories for grouping related events"""
    CONFIG = auto()      # Configuration loading, validation
    PARSER = auto()      # Figure / animation line parsing, fallbacks
    LOADER = auto()      # Scene block reading and assembly
    TIMELINE = auto()    # Duration and playable descriptor derivation
    PLAYBACK = auto()    # Attach, pause, resume
    SYSTEM = auto()      # Startup, shutdown, errors

    GENERAL = auto()    # Default general category
