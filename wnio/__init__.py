from wnio import network
from wnio import sim
from wnio import epanet
from wnio import utils

__version__ = '1.0.0'

__license__ = "Revised BSD License"

from wnio.utils.logger import start_logging, stop_logging
