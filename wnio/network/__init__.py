"""
The wnio.network package contains the network element records and the
network definition read from an EPANET INP file.
"""
from .base import NodeType, LinkType
from .elements import Junction, Tank, Reservoir, Pipe, Pump
from .model import NetworkDefinition
from .io import read_inpfile
