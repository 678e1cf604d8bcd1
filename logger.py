import os
import sys
import tqdm


class Logger:
    """
    Class for logging

    Parameters
    ----------
    `log_dir` : str
        directory for logging
    `log_filename` : str
        name of file to save logging
    `clear` : bool
        whether clear logging file on start
    `file` : TextIO, optional
        stream for console messages, stderr by default
    """
    def __init__(self, log_dir : str = '', log_filename : str = '', clear : bool = False, file = None):
        self.file     = file if file is not None else sys.stderr
        self.path     = log_dir
        self.filename = log_filename
        self.filepath = os.path.join(log_dir, log_filename) if log_filename else ''
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        if self.filepath and clear:
            open(self.filepath, 'w').close()

    def tqdmlog(self, message : str, to_file : bool = False, attention : bool = False):
        """
        Log message through tqdm.
        The message is written with `tqdm.write`, so it does not break running bars.

        Parameters
        ----------
        `message` : str
            Message to log
        `to_file` : bool, optional
            where save log message in file
        `attention` : bool, optional
            whether add '=' sign as attention to message
        """
        if to_file:
            self.filelog(message)
        write = lambda line: tqdm.tqdm.write(line, file=self.file)
        if attention:
            write('='*len(message))
        write(message)
        if attention:
            write('='*len(message))

    def filelog(self, message : str, filepath : str = None):
        """
        Write message to file

        Parameters
        ----------
        `message` : str
            message to log
        `filepath`: str
            Path to file to add save message
        """
        filepath = filepath if filepath is not None else self.filepath
        if filepath:
            with open(filepath, 'a') as f:
                f.write(message + '\n')
