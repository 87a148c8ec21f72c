class CampusNavError(Exception):
    pass


class GraphFrozenError(CampusNavError, RuntimeError):
    """Raised when a frozen graph is mutated."""


class UnknownAlgorithmError(CampusNavError, ValueError):
    pass


class DatasetError(CampusNavError, ValueError):
    """The dataset file could not be parsed into a {nodes, edges} document."""


class ConfigError(CampusNavError, ValueError):
    """The config file is not a readable JSON object."""
