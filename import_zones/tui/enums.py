from enum import Enum

from import_zones.classifier import MessageId


class UIStyle(str, Enum):
    BLUE = "blue"
    GREEN = "green"
    YELLOW = "yellow"
    RED = "red"
    CYAN = "cyan"
    DIM = "dim"
    WHITE = "white"


MESSAGE_ID_STYLE = {
    MessageId.FORBIDDEN_PATTERN_WAS_VIOLATED: UIStyle.RED.value,
    MessageId.NO_ALLOWED_PATTERN_DID_MATCH: UIStyle.YELLOW.value,
}
