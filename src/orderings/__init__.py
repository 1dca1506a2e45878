__version__ = "1.0.0"

from zuper_commons.logs import ZLogger

logger = ZLogger(__name__)

from .constants import *
from .ordering_base import *
from .errors import *
from .classes import *
from .checks import *
from .eq import *
from .comparison import *
from .instances import *
