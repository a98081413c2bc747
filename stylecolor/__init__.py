from .color import Color, ColorError, ColorLike, ColorlessOperationError, Hsl, Husl, \
        NotColorCoercibleError
from .config import DEFAULTS, Settings, apply_settings
from .dimension import Dimension
from .operate import operate
from .util import round_decimal
from .version import __version__
