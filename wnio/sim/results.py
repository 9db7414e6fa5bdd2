"""
The wnio.sim.results module includes the simulation result records read from
EPANET report and binary output files.

.. rubric:: Contents

.. autosummary::

    NodeResult
    LinkResult
    SystemWideResult
    BinaryHeader
    SimulationResults
    read_outputfile

"""
import dataclasses
from dataclasses import dataclass
from typing import Optional, Tuple

import pandas as pd


@dataclass(frozen=True)
class NodeResult:
    """Hydraulic results at a node for one report line or one period."""

    name: str
    elevation: float = 0.0
    demand: float = 0.0
    head: float = 0.0
    pressure: float = 0.0


@dataclass(frozen=True)
class LinkResult:
    """Hydraulic results in a link for one report line or one period."""

    name: str
    flow: float = 0.0
    velocity: float = 0.0
    headloss: float = 0.0
    status: float = 0.0


@dataclass(frozen=True)
class SystemWideResult:
    total_demand: float = 0.0
    average_efficiency: float = 0.0
    total_energy: float = 0.0


@dataclass(frozen=True)
class BinaryHeader:
    """The prolog of a binary output file.

    The layout is five 32-bit integers followed by two 32-bit floats, all
    little-endian.
    """

    magic: int
    version: int
    num_periods: int
    num_nodes: int
    num_links: int
    report_start: float
    report_step: float


@dataclass(frozen=True)
class SimulationResults:
    """
    Results read from an EPANET report file and binary output file.

    Report-derived records come first in ``node_results`` and
    ``link_results``, followed by binary-derived records in period order.
    Binary-derived records are named ``Node_<i>`` and ``Link_<i>``, where
    ``i`` is the index within the period, so names repeat every period.

    .. rubric:: Attributes

    .. autosummary::

        network_name
        node_results
        link_results
        system_result
        header
        skipped

    """

    network_name: Optional[str] = None
    node_results: Tuple[NodeResult, ...] = ()
    link_results: Tuple[LinkResult, ...] = ()
    system_result: Optional[SystemWideResult] = None
    header: Optional[BinaryHeader] = None
    skipped: tuple = ()

    def node_dataframe(self) -> pd.DataFrame:
        """Node results as a DataFrame, one row per record"""
        columns = [f.name for f in dataclasses.fields(NodeResult)]
        return pd.DataFrame([dataclasses.astuple(r) for r in self.node_results], columns=columns)

    def link_dataframe(self) -> pd.DataFrame:
        """Link results as a DataFrame, one row per record"""
        columns = [f.name for f in dataclasses.fields(LinkResult)]
        return pd.DataFrame([dataclasses.astuple(r) for r in self.link_results], columns=columns)

    def format_results(self) -> str:
        """
        Format all results as text, with values to two decimal places.

        Returns
        -------
        str
        """
        lines = ['EPANET Simulation Results', '========================', '', 'Node Results:']
        for node in self.node_results:
            lines.append('Node ID: {}'.format(node.name))
            lines.append('  Elevation: {:.2f}'.format(node.elevation))
            lines.append('  Demand: {:.2f}'.format(node.demand))
            lines.append('  Head: {:.2f}'.format(node.head))
            lines.append('  Pressure: {:.2f}'.format(node.pressure))

        lines += ['', 'Link Results:']
        for link in self.link_results:
            lines.append('Link ID: {}'.format(link.name))
            lines.append('  Flow: {:.2f}'.format(link.flow))
            lines.append('  Velocity: {:.2f}'.format(link.velocity))
            lines.append('  Head Loss: {:.2f}'.format(link.headloss))
            lines.append('  Status: {:.2f}'.format(link.status))

        if self.system_result is not None:
            lines += ['', 'System-Wide Results:']
            lines.append('Total Demand: {:.2f}'.format(self.system_result.total_demand))
            lines.append('Average Efficiency: {:.2f}'.format(self.system_result.average_efficiency))
            lines.append('Total Energy Consumption: {:.2f}'.format(self.system_result.total_energy))
        return '\n'.join(lines) + '\n'

    def display_results(self):
        """Print all results, with values to two decimal places"""
        print(self.format_results(), end='')


def read_outputfile(report_file, binary_file, encoding='utf-8'):
    """
    Read an EPANET report file and binary output file

    Parameters
    ----------
    report_file : str
        Name of the report (RPT) file
    binary_file : str
        Name of the binary output (OUT) file
    encoding : str, optional
        Text encoding of the report file, by default 'utf-8'

    Returns
    -------
    SimulationResults

    """
    from wnio.epanet.io import OutputFile

    return OutputFile(encoding=encoding).read(report_file, binary_file)
