"""
The wnio.sim package contains the simulation results read from EPANET report
and binary output files.
"""
from .results import NodeResult, LinkResult, SystemWideResult, BinaryHeader, SimulationResults, read_outputfile
