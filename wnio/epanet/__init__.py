"""
The wnio.epanet package provides readers for EPANET INP, report and binary
output files.
"""
from .io import InpFile, RptFile, BinFile, OutputFile
from .util import MAGIC_NUMBER, LineResult, SkippedLine
from . import io, util, exceptions
