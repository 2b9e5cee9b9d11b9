import os
import tqdm


class Logger:
    """
    Class for logging of solve replays and tracking

    Parameters
    ----------
    `log_dir` : str
        directory for logging, created if it does not exist
    `log_filename` : str
        name of file to save logging, nothing is saved to file if empty
    `clear` : bool
        whether clear logging file on start
    `pbar` : tqdm, optional
        progress bar to write messages through, also used for iteration numbers
    """
    def __init__(self, log_dir : str = '', log_filename : str = '', clear : bool = False, pbar : tqdm.tqdm = None):
        self.pbar     = pbar
        self.path     = log_dir
        self.filename = log_filename
        self.filepath = os.path.join(log_dir, log_filename) if log_filename else ''
        if log_dir and not os.path.exists(log_dir):
            os.makedirs(log_dir)
        if self.filepath and clear:
            open(self.filepath, 'w').close()

    def tqdmlog(self, message : str, pbar : tqdm.tqdm = None, to_file : bool = False, attention : bool = False, add_iter_num : bool = False):
        """
        Log message without breaking tqdm progress bars

        Parameters
        ----------
        `message` : str
            Message to log
        `pbar` : tqdm, optional
            progress bar for iteration number, the one of logger is preferred
        `to_file` : bool, optional
            whether save log message in file
        `attention` : bool, optional
            whether surround message with '=' lines
        `add_iter_num` : bool, optional
            whether add iteration number of progress bar as prefix to message
        """
        pbar = pbar if self.pbar is None else self.pbar
        if add_iter_num and pbar is not None:
            message = f'{pbar.n:5} | {message}'
        if to_file:
            self.filelog(message)
        if attention:
            tqdm.tqdm.write('='*len(message))
        tqdm.tqdm.write(message)
        if attention:
            tqdm.tqdm.write('='*len(message))

    def filelog(self, message : str, filepath : str = None):
        """
        Append message to file

        Parameters
        ----------
        `message` : str
            message to log
        `filepath`: str, optional
            path to file, file of logger by default
        """
        filepath = filepath if filepath is not None else self.filepath
        if filepath:
            with open(filepath, 'a') as f:
                f.write(message + '\n')

    def splitlog(self, stage : str, move_count : int, to_file : bool = True):
        """
        Log a done stage of a solve as a table row

        Parameters
        ----------
        `stage` : str
            id of the done stage
        `move_count` : int
            amount of moves made since the start of the solve
        `to_file` : bool, optional
            whether save the row in file
        """
        self.tqdmlog(f'{stage:>8} | {move_count:3} moves', to_file=to_file)
