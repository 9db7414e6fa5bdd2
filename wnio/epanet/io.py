"""
The wnio.epanet.io module contains methods for reading EPANET input, report
and binary output files.

.. rubric:: Contents

.. autosummary::

    InpFile
    RptFile
    BinFile
    OutputFile

----


"""
import io
import os
import logging

import numpy as np

from wnio.network.elements import Junction, Reservoir, Tank, Pipe, Pump
from wnio.network.model import NetworkDefinition
from wnio.sim.results import NodeResult, LinkResult, SystemWideResult, BinaryHeader, SimulationResults

from .exceptions import ENSyntaxError, ENValueError, ENFileNotFoundError, ENInvalidFormatError, ENTruncatedFileError
from .util import INP_SECTIONS, INP_MIN_FIELDS, RPT_SECTIONS, RPT_MIN_FIELDS, MAGIC_NUMBER
from .util import LineResult, SkippedLine, split_fields, strip_comment, pair_attributes, to_float, check_fields

logger = logging.getLogger(__name__)


class _TextFile(object):
    """Shared line handling for the section-based text readers."""

    min_fields = dict()
    _handlers = dict()

    def __init__(self, encoding='utf-8'):
        self.encoding = encoding

    def read_line(self, section, line, line_num=None):
        """
        Convert one line of a section into a record.

        Lines with too few fields or fields that are not numbers do not raise
        an exception; they are returned as a skipped line.

        Parameters
        ----------
        section : str
            The section the line belongs to
        line : str
            The line contents
        line_num : int, optional
            The line number, used in diagnostics

        Returns
        -------
        LineResult
        """
        current = split_fields(line)
        try:
            check_fields(current, self.min_fields[section], section, line_num=line_num, line=line)
            record = self._handlers[section](self, current, line_num, line)
        except (ENSyntaxError, ENValueError) as e:
            logger.debug('Skipped %s line %s: %s', section, line_num, e)
            return LineResult(skipped=SkippedLine(section, line_num, line, e))
        return LineResult(record=record)


def _field(current, i, line_num, line, default=None):
    if default is not None and len(current) <= i:
        return default
    return to_float(current[i], line_num=line_num, line=line)


class InpFile(_TextFile):
    """
    EPANET INP file reader class.

    Reads the junction, tank, reservoir, pipe and pump sections of an EPANET
    INP file. Other sections are ignored. The EPANET Users Manual provides
    full documentation for the INP file format.

    Parameters
    ----------
    encoding : str, optional
        Text encoding of the file, by default 'utf-8'
    strip_comments : bool, optional
        If True, text after a ``;`` anywhere on a line is removed before the
        line is read. By default only lines that start with ``;`` are
        comments, and a ``;`` later in a line is an ordinary field.
    """
    min_fields = INP_MIN_FIELDS

    def __init__(self, encoding='utf-8', strip_comments=False):
        super().__init__(encoding=encoding)
        self.strip_comments = strip_comments

    def read(self, filename):
        """
        Method to read an EPANET INP file into a network definition.

        Parameters
        ----------
        filename : str
            An EPANET INP input file

        Returns
        -------
        :class:`~wnio.network.model.NetworkDefinition`

        Raises
        ------
        ENFileNotFoundError
            If the file does not exist
        """
        if not os.path.isfile(filename):
            raise ENFileNotFoundError(302, filename)
        logger.debug('Read EPANET INP data from %s', filename)

        records = dict((sec, []) for sec in INP_SECTIONS)
        skipped = []
        section = None
        with io.open(filename, 'r', encoding=self.encoding) as f:
            for lnum, line in enumerate(f, 1):
                if self.strip_comments:
                    line = strip_comment(line)
                else:
                    line = line.strip()
                if len(line) == 0 or line.startswith(';'):
                    continue
                elif line.startswith('['):
                    sec = line.upper()
                    if sec in INP_SECTIONS:
                        section = sec
                    else:
                        logger.debug('%s:%d: section %s not read', filename, lnum, line)
                        section = None
                    continue
                elif section is None:
                    continue
                result = self.read_line(section, line, lnum)
                if result.ok:
                    records[section].append(result.record)
                else:
                    skipped.append(result.skipped)

        wn = NetworkDefinition(name=filename,
                               junctions=tuple(records['[JUNCTIONS]']),
                               tanks=tuple(records['[TANKS]']),
                               reservoirs=tuple(records['[RESERVOIRS]']),
                               pipes=tuple(records['[PIPES]']),
                               pumps=tuple(records['[PUMPS]']),
                               skipped=tuple(skipped))
        logger.debug('Nodes: %d; Links: %d; Skipped lines: %d', wn.num_nodes, wn.num_links, len(skipped))
        return wn

    def _read_junction(self, current, lnum, line):
        return Junction(current[0], attributes=pair_attributes(current[1:]))

    def _read_tank(self, current, lnum, line):
        return Tank(current[0],
                    _field(current, 1, lnum, line),
                    _field(current, 2, lnum, line),
                    _field(current, 3, lnum, line),
                    _field(current, 4, lnum, line),
                    _field(current, 5, lnum, line, default=0.0),
                    _field(current, 6, lnum, line, default=0.0),
                    attributes=pair_attributes(current[7:]))

    def _read_reservoir(self, current, lnum, line):
        return Reservoir(current[0],
                         _field(current, 1, lnum, line),
                         _field(current, 2, lnum, line),
                         _field(current, 3, lnum, line, default=0.0),
                         attributes=pair_attributes(current[4:]))

    def _read_pipe(self, current, lnum, line):
        return Pipe(current[0],
                    current[1],
                    current[2],
                    _field(current, 3, lnum, line),
                    _field(current, 4, lnum, line),
                    attributes=pair_attributes(current[5:]))

    def _read_pump(self, current, lnum, line):
        return Pump(current[0],
                    current[1],
                    current[2],
                    attributes=pair_attributes(current[3:]))

    _handlers = {
        '[JUNCTIONS]': _read_junction,
        '[TANKS]': _read_tank,
        '[RESERVOIRS]': _read_reservoir,
        '[PIPES]': _read_pipe,
        '[PUMPS]': _read_pump,
    }


class RptFile(_TextFile):
    """
    EPANET report file reader class.

    A line starting with ``**`` is a section header. Node results, link
    results and system-wide results are read from sections whose header
    contains "Node Results", "Link Results" or "System Wide".

    Parameters
    ----------
    encoding : str, optional
        Text encoding of the file, by default 'utf-8'
    """
    min_fields = RPT_MIN_FIELDS

    def read(self, filename):
        """
        Read an EPANET report file.

        Parameters
        ----------
        filename : str
            An EPANET RPT file

        Returns
        -------
        :class:`~wnio.sim.results.SimulationResults`
            Results with node, link and system-wide values from the report;
            if several system-wide lines are present, the last one is kept

        Raises
        ------
        ENFileNotFoundError
            If the file does not exist
        """
        if not os.path.isfile(filename):
            raise ENFileNotFoundError(303, filename)
        logger.debug('Read EPANET report data from %s', filename)

        node_results = []
        link_results = []
        system_result = None
        skipped = []
        section = None
        with io.open(filename, 'r', encoding=self.encoding) as f:
            for lnum, line in enumerate(f, 1):
                line = line.strip()
                if line.startswith('**'):
                    section = None
                    for sec in RPT_SECTIONS:
                        if sec in line:
                            section = sec
                            break
                    continue
                elif section is None or len(line) == 0:
                    continue
                result = self.read_line(section, line, lnum)
                if not result.ok:
                    skipped.append(result.skipped)
                elif section == 'Node Results':
                    node_results.append(result.record)
                elif section == 'Link Results':
                    link_results.append(result.record)
                else:
                    system_result = result.record

        return SimulationResults(network_name=filename,
                                 node_results=tuple(node_results),
                                 link_results=tuple(link_results),
                                 system_result=system_result,
                                 skipped=tuple(skipped))

    def _read_node_result(self, current, lnum, line):
        return NodeResult(current[0],
                          elevation=_field(current, 1, lnum, line),
                          demand=_field(current, 2, lnum, line),
                          head=_field(current, 3, lnum, line),
                          pressure=_field(current, 4, lnum, line))

    def _read_link_result(self, current, lnum, line):
        return LinkResult(current[0],
                          flow=_field(current, 1, lnum, line),
                          velocity=_field(current, 2, lnum, line),
                          headloss=_field(current, 3, lnum, line),
                          status=_field(current, 4, lnum, line))

    def _read_system_result(self, current, lnum, line):
        return SystemWideResult(total_demand=_field(current, 1, lnum, line),
                                average_efficiency=_field(current, 2, lnum, line),
                                total_energy=_field(current, 3, lnum, line))

    _handlers = {
        'Node Results': _read_node_result,
        'Link Results': _read_link_result,
        'System Wide': _read_system_result,
    }


class BinFile(object):
    """
    EPANET binary output file reader class.

    The file starts with a prolog of five little-endian 32-bit integers
    (magic number, version, number of periods, number of nodes, number of
    links) and two 32-bit floats (report start, report step). Each period
    then holds head, pressure and demand for every node, followed by flow,
    velocity, headloss and status for every link, all as 32-bit floats.

    Node and link names are not stored in this layout, so records are named
    ``Node_<i>`` and ``Link_<i>`` by their index within the period.
    """
    def __init__(self):
        self.itype = '<i4'
        self.ftype = '<f4'

    def _fromfile(self, fin, dtype, count, filename, what):
        dtype = np.dtype(dtype)
        if count == 0:
            return np.empty(0, dtype=dtype)
        # counts come from the file, so check them before numpy allocates
        if count * dtype.itemsize > os.fstat(fin.fileno()).st_size - fin.tell():
            raise ENTruncatedFileError(436, filename, what)
        values = np.fromfile(fin, dtype=dtype, count=count)
        if values.size < count:
            raise ENTruncatedFileError(436, filename, what)
        return values

    def read(self, filename):
        """Read a binary file and create a results object.

        Parameters
        ----------
        filename : str
            An EPANET binary output file

        Returns
        -------
        :class:`~wnio.sim.results.SimulationResults`
            Results with the header and the node and link values of every
            period, in period order

        Raises
        ------
        ENFileNotFoundError
            If the file does not exist
        ENInvalidFormatError
            If the magic number is not 516114521
        ENTruncatedFileError
            If the file ends before all values were read
        """
        if not os.path.isfile(filename):
            raise ENFileNotFoundError(304, filename)
        logger.debug('Read binary EPANET data from %s', filename)

        node_results = []
        link_results = []
        with open(filename, 'rb') as fin:
            logger.debug('... read prolog information ...')
            prolog = self._fromfile(fin, self.itype, 2, filename, 'prolog')
            magic = int(prolog[0])
            version = int(prolog[1])
            if magic != MAGIC_NUMBER:
                raise ENInvalidFormatError(435, magic)
            counts = self._fromfile(fin, self.itype, 3, filename, 'prolog')
            times = self._fromfile(fin, self.ftype, 2, filename, 'prolog')
            header = BinaryHeader(magic, version, int(counts[0]), int(counts[1]), int(counts[2]),
                                  float(times[0]), float(times[1]))
            logger.debug('EPANET version %d', header.version)
            logger.debug('Periods: %d; Nodes: %d; Links: %d', header.num_periods, header.num_nodes, header.num_links)
            logger.debug('Report Start %g, step %g', header.report_start, header.report_step)

            nnodes = header.num_nodes
            nlinks = header.num_links
            if nnodes < 0:
                logger.warning('Negative node count %d in %s, no node results read', nnodes, filename)
                nnodes = 0
            if nlinks < 0:
                logger.warning('Negative link count %d in %s, no link results read', nlinks, filename)
                nlinks = 0
            nperiods = header.num_periods if nnodes + nlinks > 0 else 0

            logger.debug('... read results for %d periods ...', max(nperiods, 0))
            for period in range(nperiods):
                values = self._fromfile(fin, self.ftype, nnodes * 3, filename,
                                        'node results, period {}'.format(period))
                for i, (head, pressure, demand) in enumerate(values.reshape(nnodes, 3).tolist()):
                    node_results.append(NodeResult('Node_{}'.format(i), demand=demand, head=head,
                                                   pressure=pressure))
                values = self._fromfile(fin, self.ftype, nlinks * 4, filename,
                                        'link results, period {}'.format(period))
                for i, (flow, velocity, headloss, status) in enumerate(values.reshape(nlinks, 4).tolist()):
                    link_results.append(LinkResult('Link_{}'.format(i), flow=flow, velocity=velocity,
                                                   headloss=headloss, status=status))

        return SimulationResults(network_name=filename,
                                 node_results=tuple(node_results),
                                 link_results=tuple(link_results),
                                 header=header)


class OutputFile(object):
    """
    EPANET simulation output reader class.

    Reads the report file and then the binary output file of one simulation.
    Results from both files are combined, report records first.

    Parameters
    ----------
    encoding : str, optional
        Text encoding of the report file, by default 'utf-8'
    """
    def __init__(self, encoding='utf-8'):
        self.rpt = RptFile(encoding=encoding)
        self.bin = BinFile()

    def read(self, report_file, binary_file):
        """
        Read an EPANET report file and binary output file.

        Both files must exist before either is read. Any error while reading
        the binary file aborts the read; no partial results are returned.

        Parameters
        ----------
        report_file : str
            An EPANET RPT file
        binary_file : str
            An EPANET binary output file

        Returns
        -------
        :class:`~wnio.sim.results.SimulationResults`

        Raises
        ------
        ENFileNotFoundError
            If either file does not exist
        ENInvalidFormatError
            If the binary file magic number is not 516114521
        ENTruncatedFileError
            If the binary file ends before all values were read
        """
        if not os.path.isfile(report_file):
            raise ENFileNotFoundError(303, report_file)
        if not os.path.isfile(binary_file):
            raise ENFileNotFoundError(304, binary_file)

        rpt = self.rpt.read(report_file)
        out = self.bin.read(binary_file)
        return SimulationResults(network_name=report_file,
                                 node_results=rpt.node_results + out.node_results,
                                 link_results=rpt.link_results + out.link_results,
                                 system_result=rpt.system_result,
                                 header=out.header,
                                 skipped=rpt.skipped)
