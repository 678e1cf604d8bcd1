import copy
import yaml

from defaults import DEFAULT_DIVISIONS, DEFAULT_STYLE, DEFAULT_SIZE, DEFAULT_COLORS, FACES


"""
Parameters used when the config file does not set them
"""
DEFAULT_PARAMS = {
    'divisions' : DEFAULT_DIVISIONS,
    'style'     : DEFAULT_STYLE,
    'size'      : DEFAULT_SIZE,
    'colors'    : DEFAULT_COLORS,
}


class YParams:
    """
    Class to save parameters from yaml config file
    Parameters of the config file will be saved as object attributes,
    parameters missing in the file keep their default values.

    Parameters
    ----------
    `filepath` : str, optional
        Path to config file with parameters. Without it only defaults are used
    """
    def __init__(self, filepath : str = None):
        self.filepath = filepath
        self.kw = copy.deepcopy(DEFAULT_PARAMS)
        if filepath:
            self._load_params()
        for param_name, param_value in self.kw.items():
            setattr(self, param_name, param_value)

    def _load_params(self):
        """
        Load parameters from config file
        """
        with open(self.filepath) as f:
            params = yaml.safe_load(f) or {}
        if not isinstance(params, dict):
            raise ValueError(f'Config file {self.filepath} must contain a mapping')
        self.update(**params)

    def update(self, **params):
        """
        Override parameters, `None` values are skipped.
        Colors are merged with the current colors, so a subset of faces can be given.
        """
        for param_name, param_value in params.items():
            if param_name not in DEFAULT_PARAMS:
                raise KeyError(f'Unknown parameter {param_name!r}')
            if param_value is None:
                continue
            if param_name == 'colors':
                unknown = set(param_value) - set(FACES)
                if unknown:
                    raise KeyError(f'Unknown faces in colors: {sorted(unknown)}')
                param_value = {**self.kw['colors'], **param_value}
            self.kw[param_name] = param_value
            setattr(self, param_name, param_value)

    def display(self, log_function=print):
        for param_name, param_value in self.kw.items():
            log_function(f'{param_name}: {param_value}')
