import yaml

from errors import InvariantError


class YParams:
    """
    Class to save parameters from yaml config file
    Parameters of the config file will be saved as object attributes

    Parameters
    ----------
    `filepath` : str
        Path to config file with parameters
    """
    def __init__(self, filepath : str):
        self.filepath = filepath
        self._load_params()

    def _load_params(self):
        """
        Load parameters from config file
        """
        self.kw = {}
        with open(self.filepath) as f:
            params = yaml.load(f, Loader=yaml.FullLoader)
        if not isinstance(params, dict):
            raise InvariantError(f'Config file {self.filepath} must contain a mapping of parameters')
        for param_name, param_value in params.items():
            self.kw[param_name] = param_value
            setattr(self, param_name, param_value)

    def get(self, param_name : str, default=None):
        return self.kw.get(param_name, default)

    def __contains__(self, param_name : str) -> bool:
        return param_name in self.kw

    def display(self, log_function=print):
        for param_name, param_value in self.kw.items():
            log_function(f'{param_name}: {param_value}')
