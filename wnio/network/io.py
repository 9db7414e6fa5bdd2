# coding: utf-8

"""
The wnio.network.io module includes functions that create a network
definition from file.

.. rubric:: Contents

.. autosummary::

    read_inpfile

"""
import logging

import wnio.epanet

logger = logging.getLogger(__name__)


def read_inpfile(filename, encoding='utf-8', strip_comments=False):
    """
    Create a NetworkDefinition from an EPANET INP file

    Parameters
    ----------
    filename : string
        Name of the INP file.
    encoding : string, optional
        Text encoding of the INP file, by default 'utf-8'
    strip_comments : bool, optional
        If True, text after a ``;`` anywhere on a line is removed, by
        default False

    Returns
    -------
    NetworkDefinition

    """
    inpfile = wnio.epanet.InpFile(encoding=encoding, strip_comments=strip_comments)
    wn = inpfile.read(filename)

    return wn
