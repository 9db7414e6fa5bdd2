# coding: utf-8
"""Exceptions for EPANET file reading operations."""

from typing import List

EN_ERROR_CODES = {
    # Apply only to an input file
    201: "syntax error (%s)",
    202: "illegal numeric value, %s",
    # File errors
    302: "cannot open input file %s",
    303: "cannot open report file %s",
    304: "cannot open binary output file %s",
    # Output file errors
    435: "invalid file - not created by EPANET, magic number %s",
    436: "invalid file - binary output file is truncated, %s",
}
"""A dictionary of the error codes and their meanings.

:meta hide-value:
"""


class EpanetException(Exception):

    def __init__(self, code: int, *args: List[object], line_num=None, line=None) -> None:
        """An Exception class for EPANET IO exceptions.

        Parameters
        ----------
        code : int
            The EPANET error code
        args : additional non-keyword arguments, optional
            If there is a string-format within the error code's text, these will be used to
            replace the format, otherwise they will be output at the end of the Exception message.
        line_num : int, optional
            The line number, if reading a text file, by default None
        line : str, optional
            The contents of the line, by default None
        """
        msg = EN_ERROR_CODES.get(code, "unknown error")
        if args is not None:
            args = [*args]
        if r"%" in msg and len(args) > 0:
            msg = msg % repr(args.pop(0))
        if len(args) > 0:
            msg = msg + " " + repr(args)
        if line_num:
            msg = msg + ", at line {}".format(line_num)
        if line:
            msg = msg + ":\n   " + str(line)
        msg = "(Error {}) ".format(code) + msg
        self.code = code
        super().__init__(msg)


class ENSyntaxError(EpanetException, SyntaxError):
    def __init__(self, code, *args, line_num=None, line=None) -> None:
        """An EPANET exception class that also subclasses SyntaxError

        Parameters
        ----------
        code : int
            The EPANET error code
        args : additional non-keyword arguments, optional
            If there is a string-format within the error code's text, these will be used to
            replace the format, otherwise they will be output at the end of the Exception message.
        line_num : int, optional
            The line number, if reading a text file, by default None
        line : str, optional
            The contents of the line, by default None
        """
        super().__init__(code, *args, line_num=line_num, line=line)


class ENValueError(EpanetException, ValueError):
    def __init__(self, code, value, *args, line_num=None, line=None) -> None:
        """An EPANET exception class that also subclasses ValueError

        Parameters
        ----------
        code : int
            The EPANET error code
        value : Any
            The value that is invalid
        args : additional non-keyword arguments, optional
            If there is a string-format within the error code's text, these will be used to
            replace the format, otherwise they will be output at the end of the Exception message.
        line_num : int, optional
            The line number, if reading a text file, by default None
        line : str, optional
            The contents of the line, by default None
        """
        super().__init__(code, value, *args, line_num=line_num, line=line)


class ENFileNotFoundError(EpanetException, FileNotFoundError):
    def __init__(self, code, filename, *args) -> None:
        """An EPANET exception class that also subclasses FileNotFoundError

        Parameters
        ----------
        code : int
            The EPANET error code (302, 303 or 304)
        filename : str
            The path that does not exist
        args : additional non-keyword arguments, optional
            Output at the end of the Exception message.
        """
        super().__init__(code, filename, *args)
        self.path = filename


class ENInvalidFormatError(EpanetException, ValueError):
    def __init__(self, code, value, *args) -> None:
        """An EPANET exception class for binary files with an unrecognized layout.

        Parameters
        ----------
        code : int
            The EPANET error code
        value : Any
            The offending value, such as the magic number that was read
        args : additional non-keyword arguments, optional
            Output at the end of the Exception message.
        """
        super().__init__(code, value, *args)


class ENTruncatedFileError(EpanetException, EOFError):
    def __init__(self, code, filename, *args) -> None:
        """An EPANET exception class for binary files that end before all
        declared values were read.

        Parameters
        ----------
        code : int
            The EPANET error code
        filename : str
            The file that was being read
        args : additional non-keyword arguments, optional
            Output at the end of the Exception message.
        """
        super().__init__(code, filename, *args)
